"""
Structured result of a full run. Single format for plain and JSON output.
"""
from dataclasses import dataclass, field
from typing import Any

from allergen_core.models.food import ResolvedPair


@dataclass
class AllergenReport:
    safe_appearances: int
    dangerous_list: str
    safe_ingredients: list[str] = field(default_factory=list)  # sorted
    pairs: list[ResolvedPair] = field(default_factory=list)  # sorted by allergen
    food_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "food_count": self.food_count,
            "safe_appearances": self.safe_appearances,
            "safe_ingredients": list(self.safe_ingredients),
            "pairs": [p.to_dict() for p in self.pairs],
            "dangerous_list": self.dangerous_list,
        }
