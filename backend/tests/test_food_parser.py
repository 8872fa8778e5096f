"""
Unit tests: food line parsing, token splitting, skipped lines, sequential ids.
Run from repo root: python -m pytest backend/tests/test_food_parser.py -v
"""
import pytest


def test_parse_food_line_splits_ingredients_and_allergens():
    from allergen_core.parsing.food_parser import parse_food_line
    ingredients, allergens = parse_food_line("mxmxvkd kfcds sqjhc nhms (contains dairy, fish)")
    assert ingredients == frozenset({"mxmxvkd", "kfcds", "sqjhc", "nhms"})
    assert allergens == frozenset({"dairy", "fish"})


@pytest.mark.parametrize("line", [
    "",
    "   ",
    "mxmxvkd kfcds",
    "mxmxvkd (contains)",
    "(contains dairy)",
    "mxmxvkd (may contain dairy)",
])
def test_parse_food_line_non_matching_returns_none(line):
    from allergen_core.parsing.food_parser import parse_food_line
    assert parse_food_line(line) is None


def test_parse_food_line_drops_blank_tokens():
    """Double spaces leave empty tokens after splitting; they are discarded."""
    from allergen_core.parsing.food_parser import parse_food_line
    ingredients, allergens = parse_food_line("aaa  bbb (contains dairy)")
    assert ingredients == frozenset({"aaa", "bbb"})
    assert "" not in ingredients
    assert allergens == frozenset({"dairy"})


def test_read_foods_skips_blank_artifacts_and_numbers_sequentially(example_text):
    from allergen_core.parsing.food_parser import read_foods_from_text
    foods = read_foods_from_text(example_text)
    assert [f.id for f in foods] == [0, 1, 2, 3]
    assert foods[2].ingredients == frozenset({"sqjhc", "fvjkl"})
    assert foods[2].allergens == frozenset({"soy"})


def test_read_foods_ids_count_matched_lines_only():
    from allergen_core.parsing.food_parser import read_foods
    foods = read_foods(["garbage", "aaa (contains x)", "more garbage", "bbb (contains y)"])
    assert [f.id for f in foods] == [0, 1]
    assert foods[1].ingredients == frozenset({"bbb"})


def test_read_foods_from_path_strips_newlines(tmp_path, example_text):
    from allergen_core.parsing.food_parser import read_foods_from_path
    path = tmp_path / "input.txt"
    path.write_text(example_text + "\n", encoding="utf-8")
    foods = read_foods_from_path(path)
    assert len(foods) == 4
    assert foods[3].allergens == frozenset({"fish"})


def test_food_record_dict_roundtrip_is_sorted():
    from allergen_core.models.food import FoodRecord
    rec = FoodRecord(id=3, ingredients=frozenset({"b", "a"}), allergens=frozenset({"soy"}))
    d = rec.to_dict()
    assert d == {"id": 3, "ingredients": ["a", "b"], "allergens": ["soy"]}
    assert FoodRecord.from_dict(d) == rec
