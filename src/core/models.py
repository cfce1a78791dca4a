"""Core data models for the combo rating table.

Rating: the five ordinal outcomes of pairing a Genre with a Type.
ComboResult: one evaluated (genre, type, rating) triple shown by the UI.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Rating(str, Enum):
    AMAZING = "Amazing!"
    CREATIVE = "Creative"
    NOT_BAD = "Not Bad"
    HMM = "Hmm..."
    NOT_GOOD = "Not Good"

    @classmethod
    def parse(cls, label: str) -> "Rating":
        """Accept either the display label ("Hmm...") or the member name ("HMM")."""
        text = str(label).strip()
        for r in cls:
            if text == r.value or text.upper().replace(" ", "_") == r.name:
                return r
        raise ValueError(f"unknown rating: {label!r}")


# Canonical order, best first. Sorting and filtering go through this tuple.
RATING_ORDER: Tuple[Rating, ...] = (
    Rating.AMAZING,
    Rating.CREATIVE,
    Rating.NOT_BAD,
    Rating.HMM,
    Rating.NOT_GOOD,
)

_PRIORITY: Dict[Rating, int] = {r: i for i, r in enumerate(RATING_ORDER)}

# Filter sentinel meaning "every rating"
ALL = "All"


def rating_priority(rating: Rating) -> int:
    return _PRIORITY[rating]


@dataclass(frozen=True)
class ComboResult:
    genre: str
    type: str
    rating: Rating

    def as_tuple(self) -> Tuple[str, str, str]:
        return (self.genre, self.type, self.rating.value)
