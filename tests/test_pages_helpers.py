import pytest

from core.combos import count_by_rating, enumerate_all
from core.models import ALL, Rating
from inventory import GENRES, TYPES, Inventory
from pages.all_combos import filter_labels, label_to_filter
from pages.finder import GENRE_PLACEHOLDER, _picked, menu_values
from test_inventory import MemoryStore
from ui.grid import columns_for_width
from ui.inventory_dialog import InventoryPicker
from ui.theme import RATING_STYLES, rating_style


def test_filter_labels_roundtrip():
    counts = count_by_rating(enumerate_all(["RPG"], ["Fantasy", "Mushroom", "Art"]))
    labels = filter_labels(counts)
    assert labels[0] == "All (3)"
    assert "Amazing! (2)" in labels
    assert "Creative (1)" in labels
    assert "Not Good (0)" in labels
    assert [label_to_filter(lbl) for lbl in labels] == [
        ALL, "Amazing!", "Creative", "Not Bad", "Hmm...", "Not Good",
    ]


def test_finder_placeholder_means_no_pick():
    assert menu_values(["RPG"], GENRE_PLACEHOLDER) == [GENRE_PLACEHOLDER, "RPG"]
    assert _picked(GENRE_PLACEHOLDER, GENRE_PLACEHOLDER) == ""
    assert _picked("RPG", GENRE_PLACEHOLDER) == "RPG"


def test_every_rating_has_a_badge_style():
    assert set(RATING_STYLES) == set(Rating)
    assert rating_style(Rating.AMAZING)[2] == "✨"


def test_columns_for_width():
    assert columns_for_width(0) == 1
    assert columns_for_width(300) == 1
    assert columns_for_width(600) == 2
    assert columns_for_width(5000) == 3


def test_inventory_picker_tabs_and_search():
    inv = Inventory(MemoryStore(), universe_genres=["Action", "RPG", "Sim RPG"], universe_types=["Art"])
    picker = InventoryPicker(inv)
    assert picker.kind == GENRES
    assert picker.heading() == "Manage Genres"
    picker.query = "rpg"
    assert picker.visible_items() == ["RPG", "Sim RPG"]

    inv.toggle_genre("RPG")
    assert picker.tab_label(GENRES) == "Genres (1/3)"
    assert picker.tab_label(TYPES) == "Types (0/1)"

    picker.switch(TYPES)
    assert picker.query == ""
    assert picker.visible_items() == ["Art"]
    assert picker.heading() == "Manage Types"

    with pytest.raises(ValueError):
        picker.switch("platforms")
