"""
Allergen deduction pipeline: store -> candidate map -> {safe ingredients, reducer} -> formatter.
"""
import logging

from allergen_core.evaluation.candidates import all_potential_candidates
from allergen_core.evaluation.formatter import format_dangerous_list, sort_pairs
from allergen_core.evaluation.reducer import reduce_allergens
from allergen_core.evaluation.safe_ingredients import appearance_count, safe_ingredients
from allergen_core.models.report import AllergenReport
from allergen_core.store.food_store import FoodStore

logger = logging.getLogger(__name__)


class AllergenEngine:
    """
    part_1: how often safe ingredients appear across all foods.
    part_2: dangerous ingredients ordered by the allergen they carry.
    """

    def __init__(self, store: FoodStore):
        self._store = store

    def part_1(self) -> int:
        return appearance_count(safe_ingredients(self._store), self._store)

    def part_2(self) -> str:
        candidate_map = all_potential_candidates(self._store)
        return format_dangerous_list(reduce_allergens(candidate_map))

    def analyze(self) -> AllergenReport:
        """Both results from a single candidate map build."""
        candidate_map = all_potential_candidates(self._store)
        # safe set must be taken before the reducer shrinks the candidate sets
        safe = safe_ingredients(self._store, candidate_map)
        pairs = sort_pairs(reduce_allergens(candidate_map))
        report = AllergenReport(
            safe_appearances=appearance_count(safe, self._store),
            dangerous_list=format_dangerous_list(pairs),
            safe_ingredients=sorted(safe),
            pairs=pairs,
            food_count=len(self._store),
        )
        logger.info(
            "ANALYZE foods=%d safe_appearances=%d allergens=%d",
            report.food_count, report.safe_appearances, len(pairs),
        )
        return report
