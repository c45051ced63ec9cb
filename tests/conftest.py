"""
Pytest configuration and fixtures for Recipe Studio tests.
"""

import os
import random

import pytest
from unittest.mock import MagicMock

# Keep tests independent of a developer's .env
os.environ.pop("RECIPE_CATALOG_PATH", None)

from recipe_studio.generator.catalog import build_catalog, default_catalog
from recipe_studio.generator.matcher import TemplateMatcher
from recipe_studio.recipes.base import Ingredient, Recipe


@pytest.fixture
def mock_supabase():
    """Mock Supabase client for unit tests."""
    mock_client = MagicMock()

    # Mock table operations (every builder call returns the same chain)
    mock_table = MagicMock()
    mock_table.select.return_value = mock_table
    mock_table.insert.return_value = mock_table
    mock_table.update.return_value = mock_table
    mock_table.delete.return_value = mock_table
    mock_table.eq.return_value = mock_table
    mock_table.order.return_value = mock_table
    mock_table.limit.return_value = mock_table
    mock_table.execute.return_value = MagicMock(data=[])

    mock_client.table.return_value = mock_table

    return mock_client


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def matcher(catalog):
    return TemplateMatcher(catalog, rng=random.Random(1234))


def _tpl(template_id, keywords, prep=10, cook=20):
    return dict(
        id=template_id,
        title=template_id.replace("_", " ").title(),
        description=f"{template_id} description",
        ingredients=[("Water", "1", "cup")],
        instructions=["Cook it."],
        prep_time_minutes=prep,
        cook_time_minutes=cook,
        narrative_note="Tasty.",
        keywords=keywords,
    )


@pytest.fixture
def small_catalog():
    """Catalog whose category cues are not also keywords, so fallback is reachable."""
    return build_catalog(
        templates=[
            _tpl("broth_bowl", ["broth"]),
            _tpl("noodle_pot", ["noodle"]),
            _tpl("egg_plate", ["egg"]),
            _tpl("fried_rice_plate", ["fried rice"]),
            _tpl("lemon_cake", ["cake"]),
        ],
        cuisine_affinity={"chinese": ["fried_rice_plate"], "french": ["egg_plate"]},
        categories=[
            dict(name="soup", cues=["soup", "stew"], members=["broth_bowl", "noodle_pot"]),
            dict(name="dessert", cues=["dessert"], members=["lemon_cake"]),
        ],
    )


@pytest.fixture
def sample_recipes():
    """Stored recipes as the analytics, search and shopping modules see them."""
    return [
        Recipe(
            id="r1",
            user_id="u1",
            title="Creamy Mushroom Garlic Pasta",
            description="Rich and creamy pasta",
            ingredients=[
                Ingredient("Pasta (penne or fettuccine)", "12", "oz"),
                Ingredient("Mixed mushrooms, sliced", "1", "lb"),
            ],
            instructions=["Boil pasta.", "Fry mushrooms."],
            prep_time=10,
            cook_time=20,
            servings=4,
            difficulty="medium",
            cuisine_type="Italian",
            dietary_restrictions=["Vegetarian"],
            status="completed",
            ai_generated_card="Earthy and rich.",
            created_at="2024-01-15T10:00:00+00:00",
        ),
        Recipe(
            id="r2",
            user_id="u1",
            title="Classic Caesar Salad",
            description="Crisp romaine with dressing",
            ingredients=[
                Ingredient("Romaine lettuce, chopped", "2", "heads"),
                Ingredient("Parmesan cheese, grated", "1/2", "cup"),
                Ingredient("Croutons", "1", "cup"),
            ],
            instructions=["Chop lettuce.", "Toss."],
            prep_time=15,
            cook_time=0,
            servings=2,
            difficulty="easy",
            cuisine_type="Mediterranean",
            dietary_restrictions=["Vegetarian", "Low-Carb"],
            status="pending",
            created_at="2024-02-03T08:30:00+00:00",
        ),
        Recipe(
            id="r3",
            user_id="u2",
            title="Creamy Butter Chicken",
            description="Indian curry",
            ingredients=[
                Ingredient("Chicken breast, cubed", "2", "lbs"),
                Ingredient("Garam masala", "2", "tsp"),
            ],
            instructions=["Brown chicken.", "Simmer in sauce."],
            prep_time=15,
            cook_time=30,
            servings=4,
            difficulty="hard",
            cuisine_type="Italian",
            dietary_restrictions=[],
            status="completed",
            ai_generated_card="Rich and spiced.",
            created_at="2024-02-20T19:45:00+00:00",
        ),
    ]
