"""
shopping_list.py

Purpose:
    A shopping list assembled from the ingredients of one or more recipes.
    Items keep their display amounts; nothing is summed across recipes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from recipe_studio.recipes.base import Recipe

ALL_ITEMS = "All Items"


@dataclass
class ShoppingItem:
    id: str
    name: str
    amount: str
    unit: str
    recipe_title: str
    checked: bool = False

    def line(self) -> str:
        return f"{self.amount} {self.unit} {self.name} ({self.recipe_title})"


class ShoppingList:
    def __init__(self, items: Iterable[ShoppingItem] = (), recipe_titles: Iterable[str] = ()) -> None:
        self.items: List[ShoppingItem] = list(items)
        self.recipe_titles: List[str] = list(recipe_titles)

    @classmethod
    def from_recipes(cls, recipes: Iterable[Recipe]) -> "ShoppingList":
        items: List[ShoppingItem] = []
        titles: List[str] = []
        for recipe in recipes:
            titles.append(recipe.title)
            for index, ingredient in enumerate(recipe.ingredients):
                items.append(
                    ShoppingItem(
                        id=f"{recipe.id}-{index}",
                        name=ingredient.name,
                        amount=ingredient.amount,
                        unit=ingredient.unit,
                        recipe_title=recipe.title,
                    )
                )
        return cls(items, titles)

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def toggle(self, item_id: str) -> None:
        for item in self.items:
            if item.id == item_id:
                item.checked = not item.checked

    def remove(self, item_id: str) -> None:
        self.items = [item for item in self.items if item.id != item_id]

    def clear_checked(self) -> None:
        self.items = [item for item in self.items if not item.checked]

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def checked_items(self) -> int:
        return sum(1 for item in self.items if item.checked)

    @property
    def progress(self) -> float:
        """Percent of items checked off (0 for an empty list)."""
        if not self.items:
            return 0.0
        return self.checked_items / self.total_items * 100

    def grouped(self, by_recipe: bool = True) -> Dict[str, List[ShoppingItem]]:
        if not by_recipe:
            return {ALL_ITEMS: list(self.items)}
        groups: Dict[str, List[ShoppingItem]] = {}
        for title in self.recipe_titles:
            groups[title] = [item for item in self.items if item.recipe_title == title]
        return groups

    def to_text(self) -> str:
        """Plain-text export of everything still to buy."""
        return "\n".join(item.line() for item in self.items if not item.checked)
