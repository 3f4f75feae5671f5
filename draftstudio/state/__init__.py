"""Observable studio state."""

from .publisher import Publisher
from .studio_state import StudioState
from .tree_state import TreeState

__all__ = ["Publisher", "StudioState", "TreeState"]
