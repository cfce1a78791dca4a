"""Pages package."""

from .all_combos import AllCombosPage
from .best_combos import BestCombosPage
from .finder import FinderPage

__all__ = [
    "FinderPage",
    "AllCombosPage",
    "BestCombosPage",
]
