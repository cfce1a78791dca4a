import pytest

import cli
from core import kb
from inventory import Inventory
from test_inventory import MemoryStore


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_rate(capsys):
    assert cli.main(["rate", "Puzzle", "Marathon"]) == 0
    assert _lines(capsys) == ["Hmm..."]
    cli.main(["rate", "Puzzle", "Zzz-Unknown"])
    assert _lines(capsys) == ["Not Bad"]


def test_universes(capsys):
    cli.main(["genres"])
    assert _lines(capsys) == kb.all_genres()
    cli.main(["types"])
    assert "Marathon" in _lines(capsys)


def test_all_and_best_with_overrides(capsys):
    inv = Inventory(MemoryStore())
    cli.main(["--genres", "RPG", "--types", "Fantasy,Mushroom,Art", "all"], inventory=inv)
    assert _lines(capsys) == [
        "RPG\tFantasy\tAmazing!",
        "RPG\tMushroom\tAmazing!",
        "RPG\tArt\tCreative",
    ]
    cli.main(
        ["--genres", "RPG", "--types", "Fantasy,Mushroom,Art", "all", "--rating", "Creative"],
        inventory=inv,
    )
    assert _lines(capsys) == ["RPG\tArt\tCreative"]
    cli.main(["--genres", "RPG", "--types", "Fantasy,Mushroom,Art", "best"], inventory=inv)
    assert _lines(capsys) == ["RPG\tFantasy", "RPG\tMushroom"]


def test_own_disown_and_stored_selection(capsys):
    store = MemoryStore()
    inv = Inventory(store)
    cli.main(["own", "genres", "RPG", "Puzzle"], inventory=inv)
    cli.main(["own", "types", "Fantasy", "Checkers"], inventory=inv)
    cli.main(["own", "genres", "RPG"], inventory=inv)  # already owned: no-op
    cli.main(["disown", "genres", "Puzzle"], inventory=inv)
    assert inv.owned_genres == ["RPG"]
    cli.main(["best"], inventory=inv)
    assert _lines(capsys) == ["RPG\tFantasy"]
    cli.main(["owned"], inventory=inv)
    assert _lines(capsys) == ["genres: RPG", "types: Fantasy, Checkers"]


def test_select_all_and_clear(capsys):
    inv = Inventory(MemoryStore())
    cli.main(["select-all", "types"], inventory=inv)
    assert inv.owned_types == kb.all_types()
    cli.main(["clear", "types"], inventory=inv)
    assert inv.owned_types == []


def test_bad_rating_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["all", "--rating", "Superb"], inventory=Inventory(MemoryStore()))
    assert exc.value.code == 2
