"""Command-line front-end for the combo table.

Usage (from repo root):
    python -m cli rate RPG Fantasy
    python -m cli own genres RPG Simulation
    python -m cli best
    python -m cli all --rating Creative --genres RPG --types Art,Fantasy

Commands that read the owned selection use the persisted inventory unless
--genres/--types override it for a single run.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from core import kb
from core.combos import best_combos, enumerate_all, filter_by_rating
from core.models import ALL, Rating
from inventory import KINDS, Inventory

logger = logging.getLogger(__name__)


def _split(text: Optional[str]) -> Optional[List[str]]:
    if text is None:
        return None
    return [v.strip() for v in text.split(",") if v.strip()]


def _rating_arg(text: str) -> str:
    if text == ALL:
        return ALL
    try:
        return Rating.parse(text).value
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="combo-finder")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("--genres", default=None, help="Comma-separated owned genres for this run")
    p.add_argument("--types", default=None, help="Comma-separated owned types for this run")
    sub = p.add_subparsers(dest="command", required=True)

    rate = sub.add_parser("rate", help="Rate a single genre/type pair")
    rate.add_argument("genre")
    rate.add_argument("type")

    all_p = sub.add_parser("all", help="List every owned combination, best first")
    all_p.add_argument("--rating", type=_rating_arg, default=ALL)

    sub.add_parser("best", help="List owned Amazing combinations")
    sub.add_parser("genres", help="List every known genre")
    sub.add_parser("types", help="List every known type")
    sub.add_parser("owned", help="Show the owned selection")

    for name, help_text in (("own", "Mark values as owned"), ("disown", "Unmark values")):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("kind", choices=KINDS)
        sp.add_argument("values", nargs="+")

    for name, help_text in (("select-all", "Own every known value"), ("clear", "Own nothing")):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("kind", choices=KINDS)

    return p


def main(argv=None, inventory: Optional[Inventory] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "rate":
        print(kb.rating_of(args.genre, args.type).value)
        return 0
    if args.command == "genres":
        print("\n".join(kb.all_genres()))
        return 0
    if args.command == "types":
        print("\n".join(kb.all_types()))
        return 0

    inv = inventory if inventory is not None else Inventory()

    if args.command in ("own", "disown"):
        want = args.command == "own"
        for value in args.values:
            if inv.owns(args.kind, value) != want:
                inv.toggle(args.kind, value)
        logger.debug("now own %d %s", len(inv.owned(args.kind)), args.kind)
        return 0
    if args.command == "select-all":
        inv.select_all(args.kind)
        return 0
    if args.command == "clear":
        inv.clear_all(args.kind)
        return 0

    genres = _split(args.genres)
    types = _split(args.types)
    if genres is None:
        genres = inv.owned_genres
    if types is None:
        types = inv.owned_types

    if args.command == "owned":
        print(f"genres: {', '.join(genres)}")
        print(f"types: {', '.join(types)}")
    elif args.command == "all":
        for c in filter_by_rating(enumerate_all(genres, types), args.rating):
            print(f"{c.genre}\t{c.type}\t{c.rating.value}")
    elif args.command == "best":
        for g, t in best_combos(genres, types):
            print(f"{g}\t{t}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
