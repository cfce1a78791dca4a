# Tests for core.kb
import unittest

from core import kb
from core.models import Rating


class TestCoreKB(unittest.TestCase):
    def test_known_ratings(self):
        self.assertEqual(kb.rating_of("Puzzle", "Marathon"), Rating.HMM)
        self.assertEqual(kb.rating_of("Shooter", "Marathon"), Rating.NOT_GOOD)
        self.assertEqual(kb.rating_of("Adventure", "Marathon"), Rating.NOT_GOOD)
        self.assertEqual(kb.rating_of("Puzzle", "Checkers"), Rating.AMAZING)
        self.assertEqual(kb.rating_of("RPG", "Art"), Rating.CREATIVE)
        self.assertEqual(kb.rating_of("Puzzle", "Marathon").value, "Hmm...")

    def test_unknown_values_rate_not_bad(self):
        self.assertEqual(kb.rating_of("Puzzle", "Zzz-Unknown"), Rating.NOT_BAD)
        self.assertEqual(kb.rating_of("No Such Genre", "Fantasy"), Rating.NOT_BAD)
        self.assertEqual(kb.rating_of("", ""), Rating.NOT_BAD)
        # known genre, known type, unlisted pair
        self.assertEqual(kb.rating_of("Board", "Fantasy"), Rating.NOT_BAD)

    def test_every_single_tier_pair_rates_its_tier(self):
        tables = [t for _, t in kb.TIER_LOOKUP_ORDER]
        for rating, table in kb.TIER_LOOKUP_ORDER:
            for genre, types in table.items():
                for t in types:
                    hits = sum(1 for other in tables if t in other.get(genre, ()))
                    if hits == 1:
                        self.assertEqual(kb.rating_of(genre, t), rating, (genre, t))

    def test_duplicate_pair_resolved_by_lookup_order(self):
        # "Card Game" is listed for Educational in both Amazing and Creative
        self.assertIn("Card Game", kb.AMAZING["Educational"])
        self.assertIn("Card Game", kb.CREATIVE["Educational"])
        self.assertEqual(kb.rating_of("Educational", "Card Game"), Rating.AMAZING)

    def test_lookup_order_constant(self):
        self.assertEqual(
            [r for r, _ in kb.TIER_LOOKUP_ORDER],
            [Rating.AMAZING, Rating.CREATIVE, Rating.HMM, Rating.NOT_GOOD],
        )

    def test_universes_sorted_and_unique(self):
        genres = kb.all_genres()
        types = kb.all_types()
        self.assertEqual(genres, sorted(set(genres)))
        self.assertEqual(types, sorted(set(types)))
        self.assertIn("Racing", genres)  # only appears in the Creative tier
        self.assertIn("Audio Novel", genres)
        self.assertIn("Marathon", types)
        self.assertIn("Fantasy", types)

    def test_universe_copies_are_independent(self):
        g = kb.all_genres()
        g.append("Hacked")
        self.assertNotIn("Hacked", kb.all_genres())

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            kb.AMAZING["New"] = ("X",)

    def test_derivation_functions(self):
        tables = [{"A": ("x", "y")}, {"B": ("y", "z")}, {"A": ("w",)}]
        self.assertEqual(kb.derive_genres(tables), ["A", "B"])
        self.assertEqual(kb.derive_types(tables), ["w", "x", "y", "z"])
        self.assertEqual(kb.derive_types(tables, ["seed"]), ["seed", "w", "x", "y", "z"])

    def test_tier_types(self):
        self.assertEqual(kb.tier_types(Rating.AMAZING, "RPG"), ["Fantasy", "Mushroom", "Ogre"])
        self.assertEqual(kb.tier_types(Rating.HMM, "Puzzle"), ["Marathon"])
        self.assertEqual(kb.tier_types(Rating.AMAZING, "Nope"), [])
        self.assertEqual(kb.tier_types(Rating.NOT_BAD, "RPG"), [])


if __name__ == "__main__":
    unittest.main()
