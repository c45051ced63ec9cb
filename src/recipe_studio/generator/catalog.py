# src/recipe_studio/generator/catalog.py
from __future__ import annotations

"""
catalog.py

Purpose:
    Build, validate and load the recipe template catalog used by the
    TemplateMatcher.

    A catalog is three static tables:
      1) templates         ordered list of RecipeTemplate
      2) cuisine affinity  cuisine (lowercase) -> template ids given a bonus
      3) categories        ordered fallback rules: prompt cues -> member ids

    The catalog is created once at startup and handed to the matcher. It is
    never modified afterwards; anything wrong with it is a ConfigurationError
    raised here, before a single request is matched.

Usage:
    from recipe_studio.generator.catalog import default_catalog, load_catalog

    catalog = default_catalog()
    catalog = load_catalog("catalog.json")   # same shape as templates.py
"""

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from recipe_studio.config import get_settings
from recipe_studio.errors import ConfigurationError
from recipe_studio.generator.schema import RecipeTemplate
from recipe_studio.generator.templates import (
    DEFAULT_CATEGORIES,
    DEFAULT_CUISINE_AFFINITY,
    DEFAULT_TEMPLATES,
)
from recipe_studio.logging_utils import get_logger
from recipe_studio.recipes.base import Ingredient

logger = get_logger(__name__)

_REQUIRED_TEMPLATE_FIELDS = ("id", "title", "instructions")


@dataclass(frozen=True)
class CategoryRule:
    name: str
    cues: Tuple[str, ...]
    members: Tuple[str, ...]


class TemplateCatalog:
    """Read-only set of templates plus the cuisine and category tables."""

    def __init__(
        self,
        templates: Sequence[RecipeTemplate],
        cuisine_affinity: Optional[Mapping[str, Sequence[str]]] = None,
        categories: Sequence[CategoryRule] = (),
    ) -> None:
        self._templates: Tuple[RecipeTemplate, ...] = tuple(templates)
        self._by_id: Mapping[str, RecipeTemplate] = MappingProxyType(
            {t.id: t for t in self._templates}
        )
        self._affinity: Mapping[str, frozenset] = MappingProxyType(
            {
                cuisine.strip().lower(): frozenset(ids)
                for cuisine, ids in (cuisine_affinity or {}).items()
            }
        )
        self._categories: Tuple[CategoryRule, ...] = tuple(categories)
        self.validate()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def templates(self) -> Tuple[RecipeTemplate, ...]:
        return self._templates

    @property
    def categories(self) -> Tuple[CategoryRule, ...]:
        return self._categories

    @property
    def cuisine_affinity(self) -> Mapping[str, frozenset]:
        return self._affinity

    def __iter__(self) -> Iterator[RecipeTemplate]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._by_id

    def get(self, template_id: str) -> RecipeTemplate:
        try:
            return self._by_id[template_id]
        except KeyError:
            raise KeyError(f"Unknown recipe template '{template_id}'") from None

    def has_affinity(self, cuisine: Optional[str], template_id: str) -> bool:
        """True when `template_id` is in the affinity set of `cuisine`."""
        if not cuisine:
            return False
        return template_id in self._affinity.get(cuisine.strip().lower(), frozenset())

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def validate(self) -> None:
        if not self._templates:
            raise ConfigurationError("Recipe template catalog is empty")

        seen: set[str] = set()
        for tpl in self._templates:
            for name in _REQUIRED_TEMPLATE_FIELDS:
                if not getattr(tpl, name):
                    raise ConfigurationError(
                        f"Template '{tpl.id or '<no id>'}' is missing required field '{name}'"
                    )
            if tpl.id in seen:
                raise ConfigurationError(f"Duplicate template id '{tpl.id}'")
            seen.add(tpl.id)
            if tpl.prep_time_minutes < 0 or tpl.cook_time_minutes < 0:
                raise ConfigurationError(f"Template '{tpl.id}' has a negative prep/cook time")

        for cuisine, ids in self._affinity.items():
            unknown = sorted(set(ids) - seen)
            if unknown:
                raise ConfigurationError(
                    f"Cuisine affinity '{cuisine}' references unknown templates: {unknown}"
                )

        for rule in self._categories:
            if not rule.cues or not rule.members:
                raise ConfigurationError(f"Category '{rule.name}' needs cues and members")
            unknown = sorted(set(rule.members) - seen)
            if unknown:
                raise ConfigurationError(
                    f"Category '{rule.name}' references unknown templates: {unknown}"
                )


# ----------------------------------------------------------------------
# Builders
# ----------------------------------------------------------------------
def _ingredient(raw: Any, template_id: str) -> Ingredient:
    if isinstance(raw, Mapping):
        return Ingredient.from_dict(raw)
    if isinstance(raw, (list, tuple)) and len(raw) == 3:
        name, amount, unit = raw
        return Ingredient(name=str(name), amount=str(amount), unit=str(unit))
    raise ConfigurationError(f"Template '{template_id}' has a malformed ingredient: {raw!r}")


def template_from_dict(data: Mapping[str, Any]) -> RecipeTemplate:
    """Turn one catalog entry (dict) into a RecipeTemplate."""
    template_id = str(data.get("id") or "")
    try:
        return RecipeTemplate(
            id=template_id,
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            ingredients=tuple(_ingredient(i, template_id) for i in data.get("ingredients") or []),
            instructions=tuple(str(s) for s in data.get("instructions") or []),
            prep_time_minutes=int(data.get("prep_time_minutes") or 0),
            cook_time_minutes=int(data.get("cook_time_minutes") or 0),
            narrative_note=str(data.get("narrative_note") or ""),
            keywords=tuple(str(k).lower() for k in data.get("keywords") or []),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Template '{template_id}' is malformed: {exc}") from exc


def build_catalog(
    templates: Sequence[Mapping[str, Any]],
    cuisine_affinity: Optional[Mapping[str, Sequence[str]]] = None,
    categories: Sequence[Mapping[str, Any]] = (),
) -> TemplateCatalog:
    """Build and validate a catalog from plain dict/list data."""
    for raw in templates:
        if not isinstance(raw, Mapping):
            raise ConfigurationError(f"Template entries must be objects, got {raw!r}")

    rules: List[CategoryRule] = []
    for raw in categories:
        if not isinstance(raw, Mapping):
            raise ConfigurationError(f"Category entries must be objects, got {raw!r}")
        rules.append(
            CategoryRule(
                name=str(raw.get("name") or ""),
                cues=tuple(str(c).lower() for c in raw.get("cues") or []),
                members=tuple(str(m) for m in raw.get("members") or []),
            )
        )
    return TemplateCatalog(
        templates=[template_from_dict(t) for t in templates],
        cuisine_affinity=cuisine_affinity,
        categories=rules,
    )


@lru_cache(maxsize=1)
def default_catalog() -> TemplateCatalog:
    """The built-in catalog, built once per process."""
    catalog = build_catalog(DEFAULT_TEMPLATES, DEFAULT_CUISINE_AFFINITY, DEFAULT_CATEGORIES)
    logger.debug(
        "Built default catalog with %d templates",
        len(catalog),
        extra={
            "invoking_func": "default_catalog",
            "invoking_purpose": "Load the built-in template catalog",
            "next_step": "Hand catalog to TemplateMatcher",
            "resolution": "",
        },
    )
    return catalog


def load_catalog(path: str | Path) -> TemplateCatalog:
    """
    Load a catalog from a JSON file:

        {
          "templates": [{"id": ..., "title": ..., "ingredients": [...], ...}],
          "cuisine_affinity": {"italian": ["..."]},
          "categories": [{"name": "pasta", "cues": ["pasta"], "members": ["..."]}]
        }
    """
    path = Path(path)
    try:
        doc: Dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error(
            "Could not read template catalog %s: %s",
            path,
            exc,
            extra={
                "invoking_func": "load_catalog",
                "invoking_purpose": "Load a template catalog from JSON",
                "next_step": "Abort startup",
                "resolution": "Fix RECIPE_CATALOG_PATH or the JSON document",
            },
        )
        raise ConfigurationError(f"Cannot load template catalog from {path}: {exc}") from exc

    if not isinstance(doc, dict):
        raise ConfigurationError(f"Template catalog {path} must be a JSON object")

    catalog = build_catalog(
        doc.get("templates") or [],
        doc.get("cuisine_affinity") or {},
        doc.get("categories") or [],
    )
    logger.info(
        "Loaded %d templates from %s",
        len(catalog),
        path,
        extra={
            "invoking_func": "load_catalog",
            "invoking_purpose": "Load a template catalog from JSON",
            "next_step": "Hand catalog to TemplateMatcher",
            "resolution": "",
        },
    )
    return catalog


def catalog_from_settings() -> TemplateCatalog:
    """Catalog from RECIPE_CATALOG_PATH when set, otherwise the built-in one."""
    settings = get_settings()
    if settings.catalog_path:
        return load_catalog(settings.catalog_path)
    return default_catalog()
