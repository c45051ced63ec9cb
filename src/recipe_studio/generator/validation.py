"""
validation.py

Purpose:
    Checks a caller runs on a GenerationRequest before it reaches the matcher.
    The matcher assumes these already hold and does not repeat them.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional

from recipe_studio.errors import InvalidRequest
from recipe_studio.generator.schema import GenerationRequest
from recipe_studio.recipes.base import DIFFICULTIES

MIN_PROMPT_LENGTH = 10
SERVINGS_RANGE = (1, 20)
TOTAL_MINUTES_RANGE = (5, 480)


def _check_range(value: Optional[int], bounds: tuple[int, int], field: str) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRequest(f"{field} must be a whole number", field=field)
    low, high = bounds
    if not low <= value <= high:
        raise InvalidRequest(f"{field} must be between {low} and {high}", field=field)


def validate_request(request: GenerationRequest) -> GenerationRequest:
    prompt = (request.prompt_text or "").strip()
    if len(prompt) < MIN_PROMPT_LENGTH:
        raise InvalidRequest(
            f"Please provide a more detailed description (at least {MIN_PROMPT_LENGTH} characters)",
            field="prompt_text",
        )

    if request.difficulty is not None and request.difficulty not in DIFFICULTIES:
        raise InvalidRequest(
            f"difficulty must be one of {', '.join(DIFFICULTIES)}", field="difficulty"
        )

    _check_range(request.servings, SERVINGS_RANGE, "servings")
    _check_range(request.max_total_minutes, TOTAL_MINUTES_RANGE, "max_total_minutes")

    tags = request.dietary_tags
    if tags is not None and not isinstance(tags, (list, tuple)):
        raise InvalidRequest("dietary tags must be a list of strings", field="dietary_tags")
    for tag in tags or ():
        if not isinstance(tag, str) or not tag.strip():
            raise InvalidRequest("dietary tags must be non-empty strings", field="dietary_tags")

    return request


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def build_request(
    prompt_text: str,
    *,
    cuisine: Optional[str] = None,
    difficulty: Optional[str] = None,
    servings: Optional[int] = None,
    dietary_tags: Optional[Iterable[str]] = None,
    max_total_minutes: Optional[int] = None,
) -> GenerationRequest:
    """Build a validated request from loose form input."""
    if isinstance(dietary_tags, str):
        raise InvalidRequest("dietary tags must be a list of strings", field="dietary_tags")
    diff = _clean(difficulty)
    request = GenerationRequest(
        prompt_text=(prompt_text or "").strip(),
        cuisine=_clean(cuisine),
        difficulty=diff.lower() if diff else None,
        servings=servings,
        dietary_tags=[t.strip() for t in dietary_tags or [] if isinstance(t, str) and t.strip()],
        max_total_minutes=max_total_minutes,
    )
    return validate_request(request)
