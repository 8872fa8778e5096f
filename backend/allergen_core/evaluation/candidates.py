"""
Candidate ingredients per allergen.
An ingredient can carry an allergen only if it is listed in every food declaring
that allergen, so each candidate set is the intersection (never the union) of those
foods' ingredient sets.
"""
import logging
from typing import Dict, Set

from allergen_core.store.food_store import FoodStore

logger = logging.getLogger(__name__)


def potential_allergen_ingredients(store: FoodStore, allergen: str) -> Set[str]:
    """
    Ingredients that could carry one allergen.
    Raises InconsistentIndexError when no food declares it.
    """
    first = store.first_with_allergen(allergen)
    candidates = set(first.ingredients)
    for food in store.records_with_allergen(allergen):
        candidates &= food.ingredients
    return candidates


def all_potential_candidates(store: FoodStore) -> Dict[str, Set[str]]:
    """Build the candidate map for every allergen any food declares."""
    candidate_map: Dict[str, Set[str]] = {}
    for allergen in store.all_allergens():
        candidate_map[allergen] = potential_allergen_ingredients(store, allergen)
        logger.debug(
            "CANDIDATES allergen=%s count=%d", allergen, len(candidate_map[allergen]),
        )
    logger.info("CANDIDATES built for %d allergens", len(candidate_map))
    return candidate_map
