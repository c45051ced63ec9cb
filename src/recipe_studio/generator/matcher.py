# src/recipe_studio/generator/matcher.py
from __future__ import annotations

"""
matcher.py

Purpose:
    Turn a GenerationRequest into a GeneratedRecipe by picking one template
    from the catalog and customizing a copy of it.

Scoring (per template, prompt lowercased):
    +3  for every multi-word keyword phrase found in the prompt
    +1  for every single-word keyword found in the prompt
    +2  when the requested cuisine has this template in its affinity set

The highest score wins; ties go to the template listed first. When every
template scores zero, category cues in the prompt pick a random member of the
first matching category, and with no cue at all a random template from the
whole catalog is used. The requested cuisine plays no part in that fallback.

All randomness goes through the injected `rng` (anything with a
`choice(sequence)` method, e.g. random.Random(seed)).
"""

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, Tuple, TypeVar

from recipe_studio.generator.catalog import TemplateCatalog
from recipe_studio.generator.schema import (
    DEFAULT_SERVINGS,
    GeneratedRecipe,
    GenerationRequest,
    RecipeTemplate,
)
from recipe_studio.logging_utils import get_logger
from recipe_studio.recipes.base import DEFAULT_DIFFICULTY

logger = get_logger(__name__)

T = TypeVar("T")

PHRASE_POINTS = 3
WORD_POINTS = 1
CUISINE_BONUS = 2
MIN_STEP_MINUTES = 5


class RandomSource(Protocol):
    def choice(self, seq: Sequence[T]) -> T:
        ...


@dataclass
class MatchResult:
    template: RecipeTemplate
    score: int
    strategy: str          # "keyword", "category:<name>" or "random"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class TemplateMatcher:
    def __init__(self, catalog: TemplateCatalog, rng: Optional[RandomSource] = None) -> None:
        self.catalog = catalog
        self.rng: RandomSource = rng if rng is not None else random.Random()

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------
    def score(self, template: RecipeTemplate, prompt_text: str, cuisine: Optional[str] = None) -> int:
        prompt = (prompt_text or "").lower()
        total = 0
        for keyword in template.keywords:
            kw = keyword.lower()
            if kw and kw in prompt:
                total += PHRASE_POINTS if " " in kw else WORD_POINTS

        if self.catalog.has_affinity(cuisine, template.id):
            total += CUISINE_BONUS
        return total

    def rank(self, request: GenerationRequest) -> List[Tuple[RecipeTemplate, int]]:
        """Every template with its score, in catalog order."""
        return [
            (tpl, self.score(tpl, request.prompt_text, request.cuisine))
            for tpl in self.catalog
        ]

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select(self, request: GenerationRequest) -> MatchResult:
        best: Optional[RecipeTemplate] = None
        best_score = 0
        for tpl, score in self.rank(request):
            # strict '>' keeps the first template on ties
            if score > best_score:
                best, best_score = tpl, score

        if best is not None:
            return MatchResult(template=best, score=best_score, strategy="keyword")

        prompt = (request.prompt_text or "").lower()
        for rule in self.catalog.categories:
            if any(cue in prompt for cue in rule.cues):
                template_id = self.rng.choice(rule.members)
                return MatchResult(
                    template=self.catalog.get(template_id),
                    score=0,
                    strategy=f"category:{rule.name}",
                )

        return MatchResult(
            template=self.rng.choice(self.catalog.templates),
            score=0,
            strategy="random",
        )

    def match(self, request: GenerationRequest) -> RecipeTemplate:
        return self.select(request).template

    # ------------------------------------------------------------------
    # Customization
    # ------------------------------------------------------------------
    def customize(self, template: RecipeTemplate, request: GenerationRequest) -> GeneratedRecipe:
        """Copy `template` and apply servings, difficulty, cuisine, diet and time limit."""
        dietary = [str(tag) for tag in (request.dietary_tags or [])]

        prep = template.prep_time_minutes
        cook = template.cook_time_minutes
        limit = request.max_total_minutes
        if limit and limit < prep + cook:
            ratio = prep / (prep + cook)
            prep = max(MIN_STEP_MINUTES, _round_half_up(limit * ratio))
            cook = max(MIN_STEP_MINUTES, limit - prep)

        note = template.narrative_note
        if dietary:
            note += f" This recipe has been customized for {', '.join(dietary)} dietary preferences."

        return GeneratedRecipe(
            template_id=template.id,
            title=template.title,
            description=template.description,
            ingredients=list(template.ingredients),
            instructions=list(template.instructions),
            prep_time_minutes=prep,
            cook_time_minutes=cook,
            narrative_note=note,
            keywords=list(template.keywords),
            servings=request.servings or DEFAULT_SERVINGS,
            difficulty=request.difficulty or DEFAULT_DIFFICULTY,
            cuisine_type=request.cuisine,
            dietary_restrictions=dietary,
        )

    def generate(self, request: GenerationRequest) -> GeneratedRecipe:
        result = self.select(request)
        logger.debug(
            "Selected template '%s' (score=%d, strategy=%s)",
            result.template.id,
            result.score,
            result.strategy,
            extra={
                "invoking_func": "generate",
                "invoking_purpose": "Match a generation request to a template",
                "next_step": "Customize the selected template",
                "resolution": "",
            },
        )
        return self.customize(result.template, request)
