"""
generate_example.py

Example usage of the recipe generator.

Run:
  python -m recipe_studio.generator.generate_example --prompt "a creamy pasta with mushrooms"
  python -m recipe_studio.generator.generate_example --prompt "something tasty" --cuisine Thai --seed 7

Save the result (requires SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY):
  python -m recipe_studio.generator.generate_example --prompt "..." --save --user-id <uuid>
"""
from __future__ import annotations

import argparse
import random
from typing import List, Optional, Tuple

from recipe_studio.config import get_settings, get_supabase_client
from recipe_studio.errors import RecipeStudioError
from recipe_studio.generator.catalog import catalog_from_settings
from recipe_studio.generator.matcher import TemplateMatcher
from recipe_studio.generator.schema import GeneratedRecipe
from recipe_studio.generator.service import RecipeGenerationService
from recipe_studio.generator.validation import build_request
from recipe_studio.logging_utils import LOG_RUN_ID, log_error, log_info
from recipe_studio.notifications.notify_team import TeamNotifier
from recipe_studio.recipes.store import RecipeStore

MODULE_PURPOSE = "Command line demo of the recipe generator."


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Generate a recipe from a prompt")
    ap.add_argument("--prompt", required=True)
    ap.add_argument("--cuisine")
    ap.add_argument("--difficulty", choices=["easy", "medium", "hard"])
    ap.add_argument("--servings", type=int)
    ap.add_argument("--dietary", action="append", default=[], help="Repeat for several tags")
    ap.add_argument("--max-minutes", type=int, dest="max_minutes")
    ap.add_argument("--seed", type=int, help="Seed for the random fallback")
    ap.add_argument("--save", action="store_true", help="Store the recipe in Supabase")
    ap.add_argument("--user-id")
    ap.add_argument("--user-email")
    return ap.parse_args(argv)


def render(recipe: GeneratedRecipe) -> str:
    lines = [
        recipe.title,
        "=" * len(recipe.title),
        recipe.description,
        "",
        f"Prep {recipe.prep_time_minutes} min | Cook {recipe.cook_time_minutes} min | "
        f"Serves {recipe.servings} | {recipe.difficulty}",
    ]
    if recipe.cuisine_type:
        lines.append(f"Cuisine: {recipe.cuisine_type}")
    if recipe.dietary_restrictions:
        lines.append(f"Dietary: {', '.join(recipe.dietary_restrictions)}")
    lines += ["", "Ingredients:"]
    lines += [f"  - {i.amount} {i.unit} {i.name}" for i in recipe.ingredients]
    lines += ["", "Instructions:"]
    lines += [f"  {n}. {step}" for n, step in enumerate(recipe.instructions, start=1)]
    lines += ["", recipe.narrative_note]
    return "\n".join(lines)


def _build_store(args: argparse.Namespace) -> Tuple[Optional[RecipeStore], Optional[TeamNotifier]]:
    if not args.save:
        return None, None
    settings = get_settings()
    client = get_supabase_client(settings)
    notifier = TeamNotifier(client, settings.notify_function)
    return RecipeStore(client, notifier=notifier, process_function=settings.process_function), notifier


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.save and not args.user_id:
        print("--save needs --user-id")
        return 2

    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        store, notifier = _build_store(args)
        service = RecipeGenerationService(
            TemplateMatcher(catalog_from_settings(), rng=rng),
            store=store,
            notifier=notifier,
        )
        request = build_request(
            args.prompt,
            cuisine=args.cuisine,
            difficulty=args.difficulty,
            servings=args.servings,
            dietary_tags=args.dietary,
            max_total_minutes=args.max_minutes,
        )
        recipe = service.generate(request)
        print(render(recipe))

        if store is not None:
            saved = service.save(recipe, args.user_id, user_email=args.user_email)
            log_info(
                f"Saved recipe {saved.id} (run {LOG_RUN_ID})",
                module_purpose=MODULE_PURPOSE,
                invoking_function="main",
                invoking_purpose="Store the generated recipe",
                next_step="Exit",
            )
    except RecipeStudioError as exc:
        log_error(
            "Recipe generation failed",
            module_purpose=MODULE_PURPOSE,
            invoking_function="main",
            invoking_purpose="Generate and optionally store a recipe from CLI arguments",
            next_step="Exit with status 1",
            resolution="Fix the prompt/options, the template catalog or the Supabase settings",
            exc=exc,
        )
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
