# core/kb.py
"""Static rating table for Genre/Type combinations.

Each tier maps a Genre to the Types that earn that rating. A pair that no
tier claims rates "Not Bad". The selectable universes of Genres and Types are
derived from the tiers rather than declared.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from core.models import Rating

TierTable = Mapping[str, Tuple[str, ...]]


def _freeze(raw: Dict[str, List[str]]) -> TierTable:
    return MappingProxyType({g: tuple(ts) for g, ts in raw.items()})


AMAZING: TierTable = _freeze({
    "RPG": ["Fantasy", "Mushroom", "Ogre"],
    "Simulation": [
        "Architecture", "Bookstore", "Cartoon", "Comics", "Cutie", "F1 Racing",
        "Game Co", "Motorsport", "Movies", "Mushroom", "Pop Star", "Romance",
        "Soccer", "Town", "Train", "Virtual Pet",
    ],
    "Sim RPG": ["Spy"],
    "Table": ["Mahjong", "Poncho", "War"],
    "Action": ["Basketball", "Historical", "Horror", "Ninja", "Ogre", "Sumo"],
    "Adventure": ["Cartoon", "Cowboy", "Detective", "Mystery"],
    "Shooter": ["Robot", "Horseshoes"],
    "Action RPG": ["Hunting", "Poncho"],
    "Online RPG": ["Medieval"],
    "Online Sim": [
        "Architecture", "Conv. Store", "Game Co", "Mushroom", "Pop Star",
        "Stocks", "Swimming", "Virtual Pet",
    ],
    "Trivia": ["Comedy", "Cosplay", "Mini-skirt", "Sumo"],
    "Life": [
        "Animal", "Comic Artist", "Dating", "F1 Racing", "Game Co", "Mushroom",
        "Ping Pong", "Pop Star", "Soccer", "Town", "Word", "Wrestling",
    ],
    "Board": ["Chess"],
    "Puzzle": ["Checkers", "Reversi"],
    "Music": ["Dance", "Drums"],
    "Motion": [
        "Dance", "Drums", "Fitness", "Pinball", "Pop Star", "Skiing", "Slots",
        "Snowboard", "Volleyball",
    ],
    "Educational": ["Card Game"],
})

CREATIVE: TierTable = _freeze({
    "RPG": [
        "Architecture", "Art", "Cosplay", "Dance", "F1 Racing", "Golf",
        "Horror", "Sumo", "Train", "Virtual Pet",
    ],
    "Simulation": ["Mini-skirt", "Sports", "Swimming"],
    "Sim RPG": ["Table", "Fashion", "Martial Arts"],
    "Action": [
        "Comedy", "Dance", "Dating", "Detective", "Golf", "Lawyer", "Pinball",
        "Train",
    ],
    "Adventure": [
        "Comedy", "Cosplay", "Horseshoes", "Martial Arts", "Mini-skirt",
        "Ninja", "Ping Pong", "Train",
    ],
    "Shooter": [
        "F1 Racing", "Fantasy", "Historical", "Hunting", "Lawyer", "Mahjong",
        "Martial Arts", "Mushroom", "Virtual Pet", "Wrestling",
    ],
    "Action RPG": ["Basketball", "Dance", "Volleyball"],
    "Racing": [
        "Baseball", "Checkers", "Cosplay", "Cowboy", "Cutie", "Dating",
        "Dungeon", "Fitness", "Game Co", "Mini-skirt", "Monster", "Mushroom",
        "Ogre", "President", "Samurai", "Train",
    ],
    "Online RPG": ["Exploration", "Swimsuit"],
    "Online Sim": ["Poncho", "Reversi"],
    "Trivia": ["Pirate", "Romance", "Swimsuit"],
    "Life": ["Art", "Fantasy"],
    "Board": ["Horseshoes", "Snowboard"],
    "Puzzle": ["Art", "Egypt", "Fantasy", "Fashion", "Sports"],
    "Music": [
        "Basketball", "Checkers", "Conv. Store", "Cowboy", "Cutie", "Dating",
        "Detective", "F1 Racing", "Horseshoes", "Mahjong", "Ping Pong",
        "Swimsuit", "Wrestling",
    ],
    "Audio Novel": [
        "Animal", "Baseball", "Martial Arts", "Mini-skirt", "Swimming", "Town",
    ],
    "Motion": [
        "Architecture", "Bookstore", "Cartoon", "Comedy", "Cosplay", "Cutie",
        "Dating", "Horseshoes", "Monster", "Mystery", "Ogre", "Romance",
        "Sports", "Stocks", "Swimsuit", "Virtual Pet", "Word", "Wrestling",
    ],
    "Educational": ["History", "Card Game"],
})

HMM: TierTable = _freeze({
    "Puzzle": ["Marathon"],
})

NOT_GOOD: TierTable = _freeze({
    "Adventure": ["Marathon"],
    "Shooter": ["Marathon"],
})

# First tier that lists a pair wins. "Not Bad" is never stored.
TIER_LOOKUP_ORDER: Tuple[Tuple[Rating, TierTable], ...] = (
    (Rating.AMAZING, AMAZING),
    (Rating.CREATIVE, CREATIVE),
    (Rating.HMM, HMM),
    (Rating.NOT_GOOD, NOT_GOOD),
)

# Types that must stay selectable even if they only show up in low tiers.
SEEDED_TYPES: Tuple[str, ...] = ("Marathon",)


def derive_genres(tables: Iterable[TierTable]) -> List[str]:
    genres = set()
    for table in tables:
        genres.update(table.keys())
    return sorted(genres)


def derive_types(tables: Iterable[TierTable], seeds: Sequence[str] = ()) -> List[str]:
    types = set(seeds)
    for table in tables:
        for listed in table.values():
            types.update(listed)
    return sorted(types)


_TABLES = [table for _, table in TIER_LOOKUP_ORDER]
_ALL_GENRES: Tuple[str, ...] = tuple(derive_genres(_TABLES))
_ALL_TYPES: Tuple[str, ...] = tuple(derive_types(_TABLES, SEEDED_TYPES))


def all_genres() -> List[str]:
    return list(_ALL_GENRES)


def all_types() -> List[str]:
    return list(_ALL_TYPES)


def rating_of(genre: str, type_: str) -> Rating:
    for rating, table in TIER_LOOKUP_ORDER:
        if type_ in table.get(genre, ()):
            return rating
    return Rating.NOT_BAD


def tier_types(rating: Rating, genre: str) -> List[str]:
    """Types ``genre`` earns for an explicit tier, in table order."""
    for r, table in TIER_LOOKUP_ORDER:
        if r == rating:
            return list(table.get(genre, ()))
    return []
