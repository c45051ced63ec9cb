# src/recipe_studio/generator/service.py
from __future__ import annotations

"""
service.py

Purpose:
    Thin orchestration around the TemplateMatcher for application code:

      request -> validate_request -> TemplateMatcher.generate -> GeneratedRecipe
      GeneratedRecipe -> preview row (not stored)
      GeneratedRecipe -> notify team + RecipeStore.save_generated (stored)
"""

import datetime
from typing import Any, Dict, Optional

from recipe_studio.errors import ConfigurationError
from recipe_studio.generator.matcher import TemplateMatcher
from recipe_studio.generator.schema import GeneratedRecipe, GenerationRequest
from recipe_studio.generator.validation import validate_request
from recipe_studio.logging_utils import get_logger
from recipe_studio.notifications.notify_team import TeamNotifier
from recipe_studio.recipes.base import Recipe
from recipe_studio.recipes.store import RecipeStore, recipe_row_from_generated

logger = get_logger(__name__)

PREVIEW_USER_ID = "current-user"


class RecipeGenerationService:
    def __init__(
        self,
        matcher: TemplateMatcher,
        store: Optional[RecipeStore] = None,
        notifier: Optional[TeamNotifier] = None,
    ) -> None:
        self.matcher = matcher
        self.store = store
        self.notifier = notifier

    def generate(self, request: GenerationRequest) -> GeneratedRecipe:
        validate_request(request)
        recipe = self.matcher.generate(request)
        logger.info(
            "Generated '%s' for prompt '%s'",
            recipe.title,
            request.prompt_text,
            extra={
                "invoking_func": "generate",
                "invoking_purpose": "Generate a recipe from a user prompt",
                "next_step": "Return recipe for preview or save",
                "resolution": "",
            },
        )
        return recipe

    def preview(self, recipe: GeneratedRecipe, now: Optional[datetime.datetime] = None) -> Dict[str, Any]:
        """Row-shaped dict for showing a generated recipe before it is saved."""
        now = now or datetime.datetime.now(datetime.timezone.utc)
        stamp = now.isoformat()
        row = recipe_row_from_generated(recipe)
        row.update(
            {
                "id": f"preview-{int(now.timestamp() * 1000)}",
                "user_id": PREVIEW_USER_ID,
                "status": "completed",
                "created_at": stamp,
                "updated_at": stamp,
            }
        )
        return row

    def save(self, recipe: GeneratedRecipe, user_id: str, *, user_email: Optional[str] = None) -> Recipe:
        if self.store is None:
            raise ConfigurationError("RecipeGenerationService was created without a RecipeStore")

        if self.notifier is not None:
            self.notifier.notify(
                "ai_recipe_generated",
                "AI Recipe Generated and Saved",
                user_email=user_email,
                user_id=user_id,
                recipe_title=recipe.title,
            )
        return self.store.save_generated(user_id, recipe, user_email=user_email)
