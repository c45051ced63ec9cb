# src/recipe_studio/generator/schema.py
from __future__ import annotations

"""
schema.py

Purpose:
    Dataclasses passed between the catalog, the matcher and its callers.

Objects:
    - RecipeTemplate     (catalog entry, immutable)
    - GenerationRequest  (what the user asked for)
    - GeneratedRecipe    (customized copy of a template, handed to the caller)

A GeneratedRecipe has no id, status or timestamps; the caller assigns those
when it stores the recipe.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from recipe_studio.recipes.base import DEFAULT_DIFFICULTY, Ingredient

DEFAULT_SERVINGS = 4


@dataclass(frozen=True)
class RecipeTemplate:
    id: str
    title: str
    description: str
    ingredients: Tuple[Ingredient, ...]
    instructions: Tuple[str, ...]
    prep_time_minutes: int
    cook_time_minutes: int
    narrative_note: str
    keywords: Tuple[str, ...] = ()

    @property
    def total_time_minutes(self) -> int:
        return self.prep_time_minutes + self.cook_time_minutes


@dataclass
class GenerationRequest:
    prompt_text: str
    cuisine: Optional[str] = None
    difficulty: Optional[str] = None
    servings: Optional[int] = None
    dietary_tags: Sequence[str] = ()
    max_total_minutes: Optional[int] = None


@dataclass
class GeneratedRecipe:
    template_id: str
    title: str
    description: str
    ingredients: List[Ingredient]
    instructions: List[str]
    prep_time_minutes: int
    cook_time_minutes: int
    narrative_note: str
    keywords: List[str] = field(default_factory=list)

    servings: int = DEFAULT_SERVINGS
    difficulty: str = DEFAULT_DIFFICULTY
    cuisine_type: Optional[str] = None
    dietary_restrictions: List[str] = field(default_factory=list)

    @property
    def total_time_minutes(self) -> int:
        return self.prep_time_minutes + self.cook_time_minutes
