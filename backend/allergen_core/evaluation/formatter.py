"""
Render resolved pairs: order by allergen name (case-sensitive) and comma-join the ingredients.
"""
from typing import Iterable, List

from allergen_core.models.food import ResolvedPair

SEPARATOR = ","


def sort_pairs(pairs: Iterable[ResolvedPair]) -> List[ResolvedPair]:
    return sorted(pairs, key=lambda p: p.allergen)


def format_dangerous_list(pairs: Iterable[ResolvedPair]) -> str:
    """'mxmxvkd,sqjhc,fvjkl' for dairy, fish, soy. Empty input -> ''."""
    return SEPARATOR.join(p.ingredient for p in sort_pairs(pairs))
