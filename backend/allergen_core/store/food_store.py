"""
Immutable store of parsed food records with the lookups the evaluators need.
"""
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from allergen_core.errors import InconsistentIndexError
from allergen_core.models.food import FoodRecord
from allergen_core.parsing.food_parser import read_foods, read_foods_from_path, read_foods_from_text

logger = logging.getLogger(__name__)


class FoodStore:
    def __init__(self, foods: Sequence[FoodRecord]):
        self._foods: tuple[FoodRecord, ...] = tuple(foods)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "FoodStore":
        return cls(read_foods(lines))

    @classmethod
    def from_text(cls, text: str) -> "FoodStore":
        return cls(read_foods_from_text(text))

    @classmethod
    def from_path(cls, path: Path) -> "FoodStore":
        store = cls(read_foods_from_path(path))
        logger.info("Loaded %d foods from %s", len(store), path)
        return store

    def __len__(self) -> int:
        return len(self._foods)

    def __iter__(self) -> Iterator[FoodRecord]:
        return iter(self._foods)

    @property
    def foods(self) -> tuple[FoodRecord, ...]:
        return self._foods

    def all_ingredients(self) -> set[str]:
        out: set[str] = set()
        for food in self._foods:
            out.update(food.ingredients)
        return out

    def all_allergens(self) -> set[str]:
        out: set[str] = set()
        for food in self._foods:
            out.update(food.allergens)
        return out

    def records_with_allergen(self, allergen: str) -> List[FoodRecord]:
        return [food for food in self._foods if allergen in food.allergens]

    def first_with_allergen(self, allergen: str) -> FoodRecord:
        """First record declaring the allergen. Raises InconsistentIndexError if none does."""
        for food in self._foods:
            if allergen in food.allergens:
                return food
        raise InconsistentIndexError(allergen)

    def appearances(self, ingredient: str) -> int:
        """Number of records listing the ingredient."""
        return sum(1 for food in self._foods if ingredient in food.ingredients)
