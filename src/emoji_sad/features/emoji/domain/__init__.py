"""Pure emoji classification logic with no filesystem access."""

from .detector import Detector
from .ranges import DEFAULT_RANGES, CodepointRange

__all__ = ["CodepointRange", "DEFAULT_RANGES", "Detector"]
