"""
Tests for TemplateMatcher.customize (servings, diet, time limit).
"""

import pytest

from recipe_studio.generator.matcher import MIN_STEP_MINUTES, TemplateMatcher
from recipe_studio.generator.schema import GenerationRequest


@pytest.fixture
def m(catalog):
    return TemplateMatcher(catalog)


def _req(**kwargs):
    kwargs.setdefault("prompt_text", "whatever you like")
    return GenerationRequest(**kwargs)


class TestDefaults:
    def test_defaults_applied(self, m, catalog):
        recipe = m.customize(catalog.get("chicken_tacos"), _req())
        assert recipe.servings == 4
        assert recipe.difficulty == "medium"
        assert recipe.cuisine_type is None
        assert recipe.dietary_restrictions == []

    def test_request_values_win(self, m, catalog):
        recipe = m.customize(
            catalog.get("chicken_tacos"),
            _req(servings=6, difficulty="hard", cuisine="Mexican"),
        )
        assert recipe.servings == 6
        assert recipe.difficulty == "hard"
        assert recipe.cuisine_type == "Mexican"

    def test_content_copied_from_template(self, m, catalog):
        tpl = catalog.get("caesar_salad")
        recipe = m.customize(tpl, _req())
        assert recipe.template_id == tpl.id
        assert recipe.title == tpl.title
        assert recipe.description == tpl.description
        assert recipe.ingredients == list(tpl.ingredients)
        assert recipe.instructions == list(tpl.instructions)
        assert recipe.keywords == list(tpl.keywords)


class TestDietaryNote:
    def test_note_appended(self, m, catalog):
        tpl = catalog.get("quinoa_salad")
        recipe = m.customize(tpl, _req(dietary_tags=["Vegan", "Gluten-Free"]))
        assert recipe.narrative_note == (
            tpl.narrative_note
            + " This recipe has been customized for Vegan, Gluten-Free dietary preferences."
        )
        assert recipe.dietary_restrictions == ["Vegan", "Gluten-Free"]

    def test_no_tags_no_note(self, m, catalog):
        tpl = catalog.get("quinoa_salad")
        assert m.customize(tpl, _req()).narrative_note == tpl.narrative_note


class TestTimeLimit:
    def test_under_limit_unchanged(self, m, catalog):
        recipe = m.customize(catalog.get("creamy_mushroom_pasta"), _req(max_total_minutes=30))
        assert (recipe.prep_time_minutes, recipe.cook_time_minutes) == (10, 20)

    def test_proportional_split(self, m, catalog):
        recipe = m.customize(catalog.get("creamy_mushroom_pasta"), _req(max_total_minutes=20))
        # 20 * 10/30 = 6.67 -> 7
        assert (recipe.prep_time_minutes, recipe.cook_time_minutes) == (7, 13)

    def test_half_rounds_up(self, m, catalog):
        # fried rice is 10/10; 13 * 0.5 = 6.5 -> 7
        recipe = m.customize(catalog.get("fried_rice"), _req(max_total_minutes=13))
        assert (recipe.prep_time_minutes, recipe.cook_time_minutes) == (7, 6)

    def test_floor_of_five_minutes(self, m, catalog):
        recipe = m.customize(catalog.get("creamy_mushroom_pasta"), _req(max_total_minutes=6))
        assert recipe.prep_time_minutes == MIN_STEP_MINUTES
        assert recipe.cook_time_minutes == MIN_STEP_MINUTES

    def test_no_cook_template_gets_cook_floor(self, m, catalog):
        # greek salad is 15/0
        recipe = m.customize(catalog.get("greek_salad"), _req(max_total_minutes=10))
        assert (recipe.prep_time_minutes, recipe.cook_time_minutes) == (10, 5)

    @pytest.mark.parametrize("limit", [10, 15, 25, 33, 47, 60, 90])
    def test_rescaled_times_stay_near_limit(self, m, catalog, limit):
        for tpl in catalog:
            recipe = m.customize(tpl, _req(max_total_minutes=limit))
            if tpl.total_time_minutes <= limit:
                assert recipe.prep_time_minutes == tpl.prep_time_minutes
                assert recipe.cook_time_minutes == tpl.cook_time_minutes
                continue
            assert recipe.prep_time_minutes >= MIN_STEP_MINUTES
            assert recipe.cook_time_minutes >= MIN_STEP_MINUTES
            assert recipe.total_time_minutes <= limit + MIN_STEP_MINUTES


class TestNoSharedState:
    def test_template_untouched(self, m, catalog):
        tpl = catalog.get("butter_chicken")
        before = (tpl.prep_time_minutes, tpl.cook_time_minutes, tpl.narrative_note, tpl.ingredients)
        m.customize(tpl, _req(max_total_minutes=10, dietary_tags=["Keto"]))
        after = (tpl.prep_time_minutes, tpl.cook_time_minutes, tpl.narrative_note, tpl.ingredients)
        assert before == after

    def test_results_are_independent(self, m, catalog):
        tpl = catalog.get("chocolate_cake")
        first = m.customize(tpl, _req())
        first.ingredients.clear()
        first.instructions.append("Eat it all.")
        second = m.customize(tpl, _req())
        assert second.ingredients == list(tpl.ingredients)
        assert second.instructions == list(tpl.instructions)

    def test_repeat_calls_equal(self, m, catalog):
        tpl = catalog.get("honey_chicken")
        req = _req(servings=2, dietary_tags=["Dairy-Free"], max_total_minutes=25)
        assert m.customize(tpl, req) == m.customize(tpl, req)
