# core/combos.py
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .kb import rating_of, tier_types
from .models import ALL, RATING_ORDER, ComboResult, Rating, rating_priority


def _unique(values: Iterable[str]) -> List[str]:
    # set semantics, first occurrence keeps its position
    return list(dict.fromkeys(values))


def rate_one(genre: str, type_: str) -> Optional[Rating]:
    """
    Rating for a single picked pair, or None while either side is unpicked.
    """
    if not genre or not type_:
        return None
    return rating_of(genre, type_)


def enumerate_all(owned_genres: Iterable[str], owned_types: Iterable[str]) -> List[ComboResult]:
    """
    Every owned (genre, type) pair with its rating, best rating first.
    Within one rating the genre-outer / type-inner order is kept.
    """
    genres = _unique(owned_genres)
    types = _unique(owned_types)
    combos = [ComboResult(g, t, rating_of(g, t)) for g in genres for t in types]
    # sorted() is stable
    return sorted(combos, key=lambda c: rating_priority(c.rating))


def filter_by_rating(
    results: Sequence[ComboResult], rating: Union[Rating, str] = ALL
) -> List[ComboResult]:
    if rating == ALL:
        return list(results)
    wanted = rating if isinstance(rating, Rating) else Rating.parse(rating)
    return [c for c in results if c.rating == wanted]


def best_combos(owned_genres: Iterable[str], owned_types: Iterable[str]) -> List[Tuple[str, str]]:
    """
    Owned pairs rated Amazing, grouped by genre in the caller's order and
    listed in the table's order within a genre (not re-sorted globally).
    """
    types = set(owned_types)
    combos: List[Tuple[str, str]] = []
    for genre in _unique(owned_genres):
        for t in tier_types(Rating.AMAZING, genre):
            if t in types:
                combos.append((genre, t))
    return combos


def count_by_rating(results: Iterable[ComboResult]) -> Dict[Rating, int]:
    counts = {r: 0 for r in RATING_ORDER}
    for c in results:
        counts[c.rating] += 1
    return counts
