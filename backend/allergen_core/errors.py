"""
Failures raised by the allergen pipeline. All are terminal for a run.
"""
from typing import Dict, FrozenSet, List, Optional


class AllergenSolverError(Exception):
    """Base class for allergen deduction failures."""


class InconsistentIndexError(AllergenSolverError, LookupError):
    """An allergen was looked up that no food record declares (caller bug)."""

    def __init__(self, allergen: str):
        super().__init__(f"no food with allergen {allergen!r}")
        self.allergen = allergen


class UnsolvableInputError(AllergenSolverError, ValueError):
    """
    A full reduction pass resolved nothing: the input has no unique
    allergen -> ingredient assignment.
    """

    def __init__(
        self,
        unresolved: Dict[str, FrozenSet[str]],
        resolved: Optional[List] = None,
    ):
        names = ", ".join(sorted(unresolved))
        super().__init__(f"unsolvable or ambiguous input; unresolved allergens: {names}")
        self.unresolved = unresolved
        self.resolved = list(resolved or [])
