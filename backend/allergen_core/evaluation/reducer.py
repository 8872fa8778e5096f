"""
Reduce candidate sets to one ingredient per allergen.

Each pass strips already-resolved ingredients from every unresolved allergen; an
allergen left with exactly one candidate is resolved. Passes repeat until every
allergen is resolved. A pass that resolves nothing means the input has no unique
solution and raises UnsolvableInputError instead of spinning.
"""
import logging
from typing import Dict, List, Set

from allergen_core.errors import UnsolvableInputError
from allergen_core.models.food import ResolvedPair

logger = logging.getLogger(__name__)


def reduce_allergens(candidate_map: Dict[str, Set[str]]) -> List[ResolvedPair]:
    """
    Mutates candidate_map in place (sets only shrink).
    Returns pairs in resolution order; ingredients are pairwise distinct.
    """
    resolved_ingredients: Set[str] = set()
    resolved_allergens: Set[str] = set()
    pairs: List[ResolvedPair] = []
    passes = 0

    while len(resolved_allergens) < len(candidate_map):
        passes += 1
        progress = 0
        for allergen in sorted(candidate_map):
            if allergen in resolved_allergens:
                continue
            candidates = candidate_map[allergen]
            candidates -= resolved_ingredients
            if len(candidates) == 1:
                ingredient = next(iter(candidates))
                resolved_allergens.add(allergen)
                resolved_ingredients.add(ingredient)
                pairs.append(ResolvedPair(allergen=allergen, ingredient=ingredient))
                progress += 1
                logger.debug("REDUCE pass=%d allergen=%s ingredient=%s", passes, allergen, ingredient)
        if progress == 0:
            unresolved = {
                a: frozenset(c) for a, c in candidate_map.items() if a not in resolved_allergens
            }
            logger.error(
                "REDUCE no progress on pass=%d resolved=%d unresolved=%s",
                passes, len(resolved_allergens), sorted(unresolved),
            )
            raise UnsolvableInputError(unresolved, resolved=pairs)

    logger.info("REDUCE resolved %d allergens in %d passes", len(pairs), passes)
    return pairs
