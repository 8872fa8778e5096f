"""
Unit tests: FoodStore lookups and the loud failure on unknown allergens.
Run from repo root: python -m pytest backend/tests/test_food_store.py -v
"""
import pytest


def test_store_universes(store):
    assert len(store) == 4
    assert store.all_allergens() == {"dairy", "fish", "soy"}
    assert store.all_ingredients() == {
        "mxmxvkd", "kfcds", "sqjhc", "nhms", "trh", "fvjkl", "sbzzf",
    }


def test_first_with_allergen_returns_earliest_record(store):
    assert store.first_with_allergen("fish").id == 0
    assert store.first_with_allergen("soy").id == 2


def test_first_with_allergen_missing_raises(store):
    from allergen_core.errors import InconsistentIndexError
    with pytest.raises(InconsistentIndexError) as exc:
        store.first_with_allergen("peanuts")
    assert exc.value.allergen == "peanuts"
    assert isinstance(exc.value, LookupError)


def test_records_with_allergen_and_appearances(store):
    assert [f.id for f in store.records_with_allergen("dairy")] == [0, 1]
    assert store.appearances("sbzzf") == 2
    assert store.appearances("mxmxvkd") == 3
    assert store.appearances("missing") == 0


def test_store_is_immutable_snapshot():
    from allergen_core.models.food import FoodRecord
    from allergen_core.store import FoodStore
    foods = [FoodRecord(id=0, ingredients=frozenset({"a"}), allergens=frozenset({"x"}))]
    store = FoodStore(foods)
    foods.append(FoodRecord(id=1, ingredients=frozenset({"b"}), allergens=frozenset({"y"})))
    assert len(store) == 1
    assert list(store) == [foods[0]]


def test_store_from_path(tmp_path, example_text):
    from allergen_core.store import FoodStore
    path = tmp_path / "foods.txt"
    path.write_text(example_text, encoding="utf-8")
    assert len(FoodStore.from_path(path)) == 4
