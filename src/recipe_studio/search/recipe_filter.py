"""
recipe_filter.py

Purpose:
    Free-text search and facet filters over a list of recipes
    (cuisine, difficulty, dietary tags, total time).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from recipe_studio.recipes.base import Recipe


@dataclass
class RecipeFilter:
    search_term: str = ""
    cuisine: Optional[str] = None
    difficulty: Optional[str] = None
    dietary: List[str] = field(default_factory=list)
    max_total_minutes: Optional[int] = None


def _matches_term(recipe: Recipe, term: str) -> bool:
    return (
        term in recipe.title.lower()
        or term in recipe.description.lower()
        or any(term in ing.name.lower() for ing in recipe.ingredients)
    )


def filter_recipes(recipes: Iterable[Recipe], flt: RecipeFilter) -> List[Recipe]:
    out = list(recipes)

    term = (flt.search_term or "").strip().lower()
    if term:
        out = [r for r in out if _matches_term(r, term)]

    if flt.cuisine:
        out = [r for r in out if r.cuisine_type == flt.cuisine]

    if flt.difficulty:
        out = [r for r in out if r.difficulty == flt.difficulty]

    if flt.dietary:
        out = [r for r in out if all(d in r.dietary_restrictions for d in flt.dietary)]

    if flt.max_total_minutes is not None:
        out = [r for r in out if r.total_time <= flt.max_total_minutes]

    return out


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for v in values:
        if not v or v in seen:
            continue
        seen.add(v)
        out.append(v)
    return out


def available_cuisines(recipes: Iterable[Recipe]) -> List[str]:
    return _unique(r.cuisine_type or "" for r in recipes)


def available_dietary(recipes: Iterable[Recipe]) -> List[str]:
    return _unique(tag for r in recipes for tag in r.dietary_restrictions)
