"""
Turn raw food lines into FoodRecords.
- Line shape: '<ingredient tokens> (contains <allergen tokens>)'.
- Lines that do not match are skipped, not rejected (blank artifacts between
  lines are common in pasted input).
- Blank tokens left over from splitting are dropped.
"""
import re
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from allergen_core.models.food import FoodRecord

logger = logging.getLogger(__name__)

FOOD_PATTERN = re.compile(r"^(?P<ingredients>[\w\s]+)\(contains (?P<allergens>[\w\s,]+)\)$")

INGREDIENT_SEPARATOR = " "
ALLERGEN_SEPARATOR = ", "


def _split_tokens(text: str, separator: str) -> frozenset:
    return frozenset(tok for tok in text.split(separator) if tok.strip())


def parse_food_line(line: str) -> Optional[Tuple[frozenset, frozenset]]:
    """
    Return (ingredients, allergens) for a matching line, None otherwise.
    'sqjhc fvjkl (contains soy)' -> ({'sqjhc', 'fvjkl'}, {'soy'})
    """
    m = FOOD_PATTERN.match(line)
    if not m:
        return None
    ingredients = _split_tokens(m.group("ingredients"), INGREDIENT_SEPARATOR)
    allergens = _split_tokens(m.group("allergens"), ALLERGEN_SEPARATOR)
    return ingredients, allergens


def read_foods(lines: Iterable[str]) -> List[FoodRecord]:
    """Parse lines into records with sequential ids (0, 1, ...) over matched lines only."""
    foods: List[FoodRecord] = []
    skipped = 0
    for lineno, line in enumerate(lines, start=1):
        parsed = parse_food_line(line.rstrip("\r\n"))
        if parsed is None:
            skipped += 1
            logger.debug("PARSE skip line=%d text=%r", lineno, line[:60])
            continue
        ingredients, allergens = parsed
        foods.append(FoodRecord(id=len(foods), ingredients=ingredients, allergens=allergens))
    logger.info("PARSE foods=%d skipped_lines=%d", len(foods), skipped)
    return foods


def read_foods_from_text(text: str) -> List[FoodRecord]:
    return read_foods(text.splitlines())


def read_foods_from_path(path: Path) -> List[FoodRecord]:
    with open(path, encoding="utf-8") as f:
        return read_foods(f)
