# Tests for core.models
import unittest

from core.models import ALL, RATING_ORDER, ComboResult, Rating, rating_priority


class TestCoreModels(unittest.TestCase):
    def test_rating_order_is_canonical(self):
        self.assertEqual(
            [r.value for r in RATING_ORDER],
            ["Amazing!", "Creative", "Not Bad", "Hmm...", "Not Good"],
        )
        self.assertEqual(len(set(RATING_ORDER)), len(Rating))

    def test_priority_follows_order(self):
        self.assertLess(rating_priority(Rating.AMAZING), rating_priority(Rating.CREATIVE))
        self.assertLess(rating_priority(Rating.NOT_BAD), rating_priority(Rating.HMM))
        self.assertEqual(rating_priority(Rating.NOT_GOOD), len(RATING_ORDER) - 1)

    def test_parse_labels_and_names(self):
        self.assertIs(Rating.parse("Hmm..."), Rating.HMM)
        self.assertIs(Rating.parse("Not Good"), Rating.NOT_GOOD)
        self.assertIs(Rating.parse("not_bad"), Rating.NOT_BAD)
        self.assertIs(Rating.parse(" Amazing! "), Rating.AMAZING)
        with self.assertRaises(ValueError):
            Rating.parse("Superb")
        with self.assertRaises(ValueError):
            Rating.parse(ALL)

    def test_rating_compares_equal_to_label(self):
        self.assertEqual(Rating.CREATIVE, "Creative")

    def test_combo_result_frozen_and_tuple(self):
        c = ComboResult("RPG", "Fantasy", Rating.AMAZING)
        self.assertEqual(c.as_tuple(), ("RPG", "Fantasy", "Amazing!"))
        self.assertTrue(getattr(c.__class__, "__dataclass_params__").frozen)


if __name__ == "__main__":
    unittest.main()
