# src/recipe_studio/generator/enhance.py
from __future__ import annotations

"""
enhance.py

Purpose:
    Deterministic rewrites of an existing recipe, offered next to the
    generator as one-click "enhancements":

      make-healthier         butter -> olive oil, sugar amounts x 0.75
      dietary-adapt          adds "Vegan", milk -> almond milk, cheese -> nutritional yeast
      ingredient-substitute  replaces the recipe card with substitution ideas
      cooking-tips           appends two tips to the instructions

    Works on a stored Recipe (card in `ai_generated_card`) or a
    GeneratedRecipe (card in `narrative_note`). The input is never modified;
    a new object with fresh lists is returned.

    Ingredient matching is case-sensitive and replaces the first occurrence
    only ("Unsalted butter" matches, "Butter" does not).
"""

import dataclasses
import re
from typing import Callable, Dict, Optional, TypeVar, Union

from recipe_studio.errors import InvalidRequest
from recipe_studio.generator.schema import GeneratedRecipe
from recipe_studio.recipes.base import Ingredient, Recipe

AnyRecipe = TypeVar("AnyRecipe", Recipe, GeneratedRecipe)

SUGAR_FACTOR = 0.75
HEALTHIER_SUFFIX = " (Healthier version with reduced calories)"

HEALTHIER_CARD = (
    "This healthier version reduces calories by 25% while maintaining great taste. "
    "We've substituted butter with heart-healthy olive oil and reduced sugar content."
)
VEGAN_CARD = (
    "This vegan adaptation maintains all the flavors you love while being completely "
    "plant-based. Perfect for those following a vegan lifestyle!"
)
SUBSTITUTE_CARD = (
    "Here are some great substitutions: Use Greek yogurt instead of sour cream, honey "
    "instead of sugar, or cauliflower rice instead of regular rice for a low-carb option."
)
TIPS_CARD = (
    "Enhanced with professional cooking techniques that will elevate your dish to "
    "restaurant quality. These tips come from years of culinary expertise!"
)
COOKING_TIPS = (
    "Pro tip: Let ingredients come to room temperature before cooking for even heat distribution.",
    "Chef's secret: Add a pinch of salt to enhance all flavors, even in sweet dishes.",
)

_LEADING_NUMBER = re.compile(r"^\s*(\d+(?:\.\d*)?|\.\d+)")


def _card_field(recipe: Union[Recipe, GeneratedRecipe]) -> str:
    return "narrative_note" if isinstance(recipe, GeneratedRecipe) else "ai_generated_card"


def _copy(recipe: AnyRecipe, card: str, **changes) -> AnyRecipe:
    changes.setdefault("ingredients", list(recipe.ingredients))
    changes.setdefault("instructions", list(recipe.instructions))
    changes.setdefault("dietary_restrictions", list(recipe.dietary_restrictions))
    changes[_card_field(recipe)] = card
    return dataclasses.replace(recipe, **changes)


def scale_amount(amount: str, factor: float) -> str:
    """
    Scale the leading number of a display amount ("1/2" scales 1, "2 1/4"
    scales 2). Amounts without a leading number are returned unchanged.
    """
    m = _LEADING_NUMBER.match(amount or "")
    if not m:
        return amount
    value = float(m.group(1)) * factor
    return str(int(value)) if value.is_integer() else repr(value)


def _replace_first(text: str, old: str, new: str) -> Optional[str]:
    return text.replace(old, new, 1) if old in text else None


def make_healthier(recipe: AnyRecipe) -> AnyRecipe:
    ingredients = []
    for ing in recipe.ingredients:
        name = _replace_first(ing.name, "butter", "olive oil") or ing.name
        amount = scale_amount(ing.amount, SUGAR_FACTOR) if "sugar" in ing.name else ing.amount
        ingredients.append(Ingredient(name=name, amount=amount, unit=ing.unit))
    return _copy(
        recipe,
        HEALTHIER_CARD,
        description=recipe.description + HEALTHIER_SUFFIX,
        ingredients=ingredients,
    )


def dietary_adapt(recipe: AnyRecipe) -> AnyRecipe:
    ingredients = []
    for ing in recipe.ingredients:
        name = (
            _replace_first(ing.name, "milk", "almond milk")
            or _replace_first(ing.name, "cheese", "nutritional yeast")
            or ing.name
        )
        ingredients.append(dataclasses.replace(ing, name=name))
    return _copy(
        recipe,
        VEGAN_CARD,
        ingredients=ingredients,
        dietary_restrictions=list(recipe.dietary_restrictions) + ["Vegan"],
    )


def ingredient_substitute(recipe: AnyRecipe) -> AnyRecipe:
    return _copy(recipe, SUBSTITUTE_CARD)


def cooking_tips(recipe: AnyRecipe) -> AnyRecipe:
    return _copy(recipe, TIPS_CARD, instructions=list(recipe.instructions) + list(COOKING_TIPS))


ENHANCEMENTS: Dict[str, Callable] = {
    "make-healthier": make_healthier,
    "dietary-adapt": dietary_adapt,
    "ingredient-substitute": ingredient_substitute,
    "cooking-tips": cooking_tips,
}


def enhance(recipe: AnyRecipe, feature_id: str) -> AnyRecipe:
    try:
        transform = ENHANCEMENTS[feature_id]
    except KeyError:
        raise InvalidRequest(
            f"Unknown enhancement '{feature_id}' (expected one of {', '.join(ENHANCEMENTS)})",
            field="feature_id",
        ) from None
    return transform(recipe)
