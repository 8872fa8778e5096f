"""
Safe ingredients: those in no allergen's candidate set. Pure set arithmetic;
candidate sets need not be reduced first.
"""
import logging
from typing import Dict, Iterable, Optional, Set

from allergen_core.evaluation.candidates import all_potential_candidates
from allergen_core.store.food_store import FoodStore

logger = logging.getLogger(__name__)


def possibly_dangerous(candidate_map: Dict[str, Set[str]]) -> Set[str]:
    """Union of every candidate set."""
    out: Set[str] = set()
    for candidates in candidate_map.values():
        out |= candidates
    return out


def safe_ingredients(
    store: FoodStore,
    candidate_map: Optional[Dict[str, Set[str]]] = None,
) -> Set[str]:
    """All ingredients minus every ingredient that could carry some allergen."""
    if candidate_map is None:
        candidate_map = all_potential_candidates(store)
    safe = store.all_ingredients() - possibly_dangerous(candidate_map)
    logger.info("SAFE ingredients=%d of %d", len(safe), len(store.all_ingredients()))
    return safe


def appearance_count(safe: Iterable[str], store: FoodStore) -> int:
    """Total occurrences across records; an ingredient in 3 foods counts 3 times."""
    return sum(store.appearances(ingredient) for ingredient in safe)
