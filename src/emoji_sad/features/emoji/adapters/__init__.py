"""
Summary: Package marker for emoji feature adapters.
Why: Keep adapter exports together for easy discovery.
"""

from .filesystem_adapter import LocalFileStoreAdapter

__all__ = ["LocalFileStoreAdapter"]
