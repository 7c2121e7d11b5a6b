"""emoji-sad: find and strip emoji characters from text files."""

__version__ = "0.1.5"

__all__ = ["__version__"]
