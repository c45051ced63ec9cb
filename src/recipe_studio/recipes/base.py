# recipes/base.py
from __future__ import annotations

"""
base.py

Purpose:
    Record types shared by every layer that touches a stored recipe:
      - the Supabase store (rows in / rows out),
      - shopping list, search filters and analytics (read-only consumers),
      - the generator service (turns a GeneratedRecipe into a row).

    Nothing in this module talks to Supabase directly.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

DIFFICULTIES = ("easy", "medium", "hard")
DEFAULT_DIFFICULTY = "medium"

# Lifecycle of a row in the `recipes` table
RECIPE_STATUSES = ("pending", "processing", "completed", "failed")


@dataclass(frozen=True)
class Ingredient:
    name: str
    amount: str      # display text ("1/2", "2 1/4", "to"), never parsed
    unit: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Ingredient":
        return cls(
            name=str(data.get("name") or ""),
            amount=str(data.get("amount") or ""),
            unit=str(data.get("unit") or ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "amount": self.amount, "unit": self.unit}


@dataclass
class Recipe:
    """A row of the `recipes` table."""

    id: str
    user_id: str
    title: str
    description: str
    ingredients: List[Ingredient]
    instructions: List[str]
    prep_time: int
    cook_time: int
    servings: int
    difficulty: str = DEFAULT_DIFFICULTY
    cuisine_type: Optional[str] = None
    dietary_restrictions: List[str] = field(default_factory=list)
    status: str = "pending"
    ai_generated_card: Optional[str] = None
    pdf_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def total_time(self) -> int:
        return self.prep_time + self.cook_time

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Recipe":
        """Build a Recipe from a Supabase row (missing columns get defaults)."""
        return cls(
            id=str(row.get("id") or ""),
            user_id=str(row.get("user_id") or ""),
            title=row.get("title") or "",
            description=row.get("description") or "",
            ingredients=[Ingredient.from_dict(i) for i in row.get("ingredients") or []],
            instructions=list(row.get("instructions") or []),
            prep_time=int(row.get("prep_time") or 0),
            cook_time=int(row.get("cook_time") or 0),
            servings=int(row.get("servings") or 0),
            difficulty=row.get("difficulty") or DEFAULT_DIFFICULTY,
            cuisine_type=row.get("cuisine_type") or None,
            dietary_restrictions=list(row.get("dietary_restrictions") or []),
            status=row.get("status") or "pending",
            ai_generated_card=row.get("ai_generated_card") or None,
            pdf_url=row.get("pdf_url") or None,
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )
