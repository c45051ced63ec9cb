"""
errors.py

Exception types shared across Recipe Studio.

    RecipeStudioError
      ├── ConfigurationError   catalog or environment is unusable (fatal)
      ├── InvalidRequest       a generation request failed caller-side checks
      └── RecipeStoreError     Supabase did not return / accept a recipe row
"""
from __future__ import annotations


class RecipeStudioError(Exception):
    """Base class for all Recipe Studio errors."""


class ConfigurationError(RecipeStudioError):
    """Raised at startup when the template catalog or settings are malformed."""


class InvalidRequest(RecipeStudioError):
    """Raised when a generation request fails validation."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class RecipeStoreError(RecipeStudioError):
    """Raised when a recipe row cannot be created, read or deleted."""
