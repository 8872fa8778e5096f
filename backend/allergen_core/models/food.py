"""
Parsed food records and resolved allergen pairs. Immutable once created.
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FoodRecord:
    id: int
    ingredients: frozenset[str] = field(default_factory=frozenset)
    allergens: frozenset[str] = field(default_factory=frozenset)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "ingredients": sorted(self.ingredients),
            "allergens": sorted(self.allergens),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "FoodRecord":
        return cls(
            id=int(d["id"]),
            ingredients=frozenset(d.get("ingredients", []) or []),
            allergens=frozenset(d.get("allergens", []) or []),
        )


@dataclass(frozen=True)
class ResolvedPair:
    """An allergen permanently matched to the one ingredient that carries it."""
    allergen: str
    ingredient: str

    def to_dict(self) -> dict:
        return {"allergen": self.allergen, "ingredient": self.ingredient}
