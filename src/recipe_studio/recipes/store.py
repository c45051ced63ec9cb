# src/recipe_studio/recipes/store.py
from __future__ import annotations

"""
store.py

Purpose:
    Read and write rows of the Supabase `recipes` table.

    The store owns the fields the generator never produces: the row id
    (assigned by Postgres), `user_id`, `status` (new rows start "pending")
    and the created/updated timestamps (column defaults).

    Authentication is not handled here: callers pass the user id they got
    from their own session. With the service-role key Row Level Security
    does not apply, so user-facing reads must pass that user id.

    After a row is inserted the `process-recipe` edge function is invoked
    with {"recipeId": ...}. Like team notifications this is best-effort.

Tables:
    recipes(id, user_id, title, description, ingredients jsonb,
            instructions jsonb, prep_time, cook_time, servings, difficulty,
            cuisine_type, dietary_restrictions, status, ai_generated_card,
            pdf_url, created_at, updated_at)
"""

from typing import Any, Dict, List, Mapping, Optional

from supabase import Client

from recipe_studio.config import DEFAULT_PROCESS_FUNCTION
from recipe_studio.errors import RecipeStoreError
from recipe_studio.generator.schema import GeneratedRecipe
from recipe_studio.logging_utils import get_logger
from recipe_studio.notifications.notify_team import TeamNotifier
from recipe_studio.recipes.base import Recipe

logger = get_logger(__name__)

TABLE = "recipes"


def recipe_row_from_generated(recipe: GeneratedRecipe) -> Dict[str, Any]:
    """Column mapping for a generated recipe (no id/status/timestamps)."""
    return {
        "title": recipe.title,
        "description": recipe.description,
        "ingredients": [i.to_dict() for i in recipe.ingredients],
        "instructions": list(recipe.instructions),
        "prep_time": recipe.prep_time_minutes,
        "cook_time": recipe.cook_time_minutes,
        "servings": recipe.servings,
        "difficulty": recipe.difficulty,
        "cuisine_type": recipe.cuisine_type,
        "dietary_restrictions": list(recipe.dietary_restrictions),
        "ai_generated_card": recipe.narrative_note,
    }


class RecipeStore:
    def __init__(
        self,
        client: Client,
        notifier: Optional[TeamNotifier] = None,
        process_function: str = DEFAULT_PROCESS_FUNCTION,
    ) -> None:
        self.client = client
        self.notifier = notifier
        self.process_function = process_function

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def create_recipe(
        self,
        user_id: str,
        fields: Mapping[str, Any],
        *,
        user_email: Optional[str] = None,
    ) -> Recipe:
        payload = dict(fields)
        payload.update({"user_id": user_id, "status": "pending"})

        try:
            res = self.client.table(TABLE).insert(payload).execute()
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "Insert into %s failed: %s",
                TABLE,
                exc,
                extra={
                    "invoking_func": "create_recipe",
                    "invoking_purpose": "Store a new recipe for a user",
                    "next_step": "Raise RecipeStoreError",
                    "resolution": "Check Supabase credentials and RLS policies on recipes",
                },
            )
            raise RecipeStoreError(f"Could not create recipe '{payload.get('title')}'") from exc

        if not res.data:
            raise RecipeStoreError(f"Supabase returned no row for recipe '{payload.get('title')}'")

        recipe = Recipe.from_row(res.data[0])
        logger.info(
            "Created recipe %s ('%s') for user %s",
            recipe.id,
            recipe.title,
            user_id,
            extra={
                "invoking_func": "create_recipe",
                "invoking_purpose": "Store a new recipe for a user",
                "next_step": "Trigger recipe processing",
                "resolution": "",
            },
        )

        self.process_recipe(recipe.id)

        if self.notifier is not None:
            self.notifier.notify(
                "recipe_created",
                "Recipe Created",
                user_email=user_email,
                user_id=user_id,
                recipe_title=recipe.title,
                recipe_id=recipe.id,
            )
        return recipe

    def process_recipe(self, recipe_id: str) -> bool:
        """Invoke the processing edge function for a stored recipe."""
        try:
            self.client.functions.invoke(
                self.process_function,
                invoke_options={"body": {"recipeId": recipe_id}},
            )
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "%s call failed for recipe %s: %s",
                self.process_function,
                recipe_id,
                exc,
                extra={
                    "invoking_func": "process_recipe",
                    "invoking_purpose": "Start processing of a new recipe",
                    "next_step": "Continue with team notification",
                    "resolution": f"Check that edge function '{self.process_function}' is deployed",
                },
            )
            return False
        return True

    def save_generated(
        self,
        user_id: str,
        recipe: GeneratedRecipe,
        *,
        user_email: Optional[str] = None,
    ) -> Recipe:
        return self.create_recipe(user_id, recipe_row_from_generated(recipe), user_email=user_email)

    def delete_recipe(self, user_id: str, recipe_id: str, *, user_email: Optional[str] = None) -> None:
        """Delete one of the user's recipes; rows of other users are never touched."""
        try:
            found = (
                self.client.table(TABLE)
                .select("title")
                .eq("id", recipe_id)
                .eq("user_id", user_id)
                .execute()
            )
            self.client.table(TABLE).delete().eq("id", recipe_id).eq("user_id", user_id).execute()
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "Delete of recipe %s failed: %s",
                recipe_id,
                exc,
                extra={
                    "invoking_func": "delete_recipe",
                    "invoking_purpose": "Remove a user's recipe",
                    "next_step": "Raise RecipeStoreError",
                    "resolution": "Check Supabase credentials and RLS policies on recipes",
                },
            )
            raise RecipeStoreError(f"Could not delete recipe {recipe_id}") from exc

        title = found.data[0].get("title") if found.data else None
        logger.info(
            "Deleted recipe %s for user %s",
            recipe_id,
            user_id,
            extra={
                "invoking_func": "delete_recipe",
                "invoking_purpose": "Remove a user's recipe",
                "next_step": "Notify team of recipe deletion",
                "resolution": "",
            },
        )

        if self.notifier is not None:
            self.notifier.notify(
                "recipe_deleted",
                "Recipe Deleted",
                user_email=user_email,
                user_id=user_id,
                recipe_title=title or "Unknown Recipe",
                recipe_id=recipe_id,
            )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list_recipes(self, user_id: Optional[str] = None, *, all_users: bool = False) -> List[Recipe]:
        """
        Recipes newest first.

        Scoped to `user_id`. Listing every user's rows (admin reports, backend
        jobs) has to be asked for with all_users=True.
        """
        if not user_id and not all_users:
            raise RecipeStoreError("list_recipes needs a user_id (or all_users=True)")
        q = self.client.table(TABLE).select("*")
        if user_id:
            q = q.eq("user_id", user_id)
        res = q.order("created_at", desc=True).execute()
        return [Recipe.from_row(row) for row in res.data or []]

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        res = self.client.table(TABLE).select("*").eq("id", recipe_id).limit(1).execute()
        if not res.data:
            return None
        return Recipe.from_row(res.data[0])
