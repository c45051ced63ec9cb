# src/recipe_studio/analytics/dashboard.py
from __future__ import annotations

"""
dashboard.py

Purpose:
    Recipe statistics for the analytics dashboard, the per-user activity
    block attached to team notifications, and the full dashboard export a
    user can send to the admin (see notifications.admin_report).

    Counts keep the order in which values first appear, so ties in the
    "top cuisines" list are broken by first appearance. Months are bucketed
    in UTC.
"""

import datetime
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd

from recipe_studio.recipes.base import Recipe

TOP_CUISINES = 5
RECENT_MONTHS = 6
RECENT_ACTIVITY = 5
REPORT_RECENT = 10
DAYS_PER_MONTH = 30

_COLUMNS = [
    "title",
    "status",
    "difficulty",
    "cuisine_type",
    "dietary_restrictions",
    "prep_time",
    "cook_time",
    "servings",
    "total_time",
    "created_at",
    "has_card",
]

_USER_INFO_KEYS = ("id", "email", "full_name", "created_at", "last_sign_in")


@dataclass
class DashboardStats:
    total_recipes: int
    completed_recipes: int
    completion_rate: int
    avg_total_minutes: int
    cuisine_counts: Dict[str, int] = field(default_factory=dict)
    difficulty_counts: Dict[str, int] = field(default_factory=dict)
    dietary_counts: Dict[str, int] = field(default_factory=dict)
    monthly_counts: Dict[str, int] = field(default_factory=dict)
    top_cuisines: List[Tuple[str, int]] = field(default_factory=list)
    recent_months: List[Tuple[str, int]] = field(default_factory=list)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def recipes_frame(recipes: Iterable[Recipe]) -> pd.DataFrame:
    rows = [
        {
            "title": r.title,
            "status": r.status,
            "difficulty": r.difficulty,
            "cuisine_type": r.cuisine_type,
            "dietary_restrictions": list(r.dietary_restrictions),
            "prep_time": r.prep_time,
            "cook_time": r.cook_time,
            "servings": r.servings,
            "total_time": r.total_time,
            "created_at": r.created_at,
            "has_card": bool(r.ai_generated_card),
        }
        for r in recipes
    ]
    return pd.DataFrame(rows, columns=_COLUMNS)


def _counts(values: pd.Series) -> Dict[str, int]:
    values = values.dropna()
    values = values[values != ""]
    if values.empty:
        return {}
    sizes = values.groupby(values, sort=False).size()
    return {str(k): int(v) for k, v in sizes.items()}


def _monthly_counts(created_at: pd.Series) -> Dict[str, int]:
    stamps = pd.to_datetime(created_at, utc=True, errors="coerce", format="ISO8601").dropna()
    if stamps.empty:
        return {}
    per_month = stamps.dt.strftime("%Y-%m").value_counts().sort_index()
    return {
        datetime.datetime.strptime(key, "%Y-%m").strftime("%b %Y"): int(count)
        for key, count in per_month.items()
    }


def dashboard_stats(recipes: Iterable[Recipe]) -> DashboardStats:
    df = recipes_frame(recipes)
    total = len(df)
    if total == 0:
        return DashboardStats(
            total_recipes=0,
            completed_recipes=0,
            completion_rate=0,
            avg_total_minutes=0,
        )

    completed = int((df["status"] == "completed").sum())
    cuisine_counts = _counts(df["cuisine_type"])
    monthly = _monthly_counts(df["created_at"])

    return DashboardStats(
        total_recipes=total,
        completed_recipes=completed,
        completion_rate=_round_half_up(completed / total * 100),
        avg_total_minutes=_round_half_up(float(df["total_time"].mean())),
        cuisine_counts=cuisine_counts,
        difficulty_counts=_counts(df["difficulty"]),
        dietary_counts=_counts(df["dietary_restrictions"].explode()),
        monthly_counts=monthly,
        # sorted() is stable, so equal counts keep first-seen order
        top_cuisines=sorted(cuisine_counts.items(), key=lambda kv: kv[1], reverse=True)[:TOP_CUISINES],
        recent_months=list(monthly.items())[-RECENT_MONTHS:],
    )


def user_activity_summary(recipes: Iterable[Recipe]) -> Dict[str, Any]:
    """Per-user analytics block sent along with team notifications."""
    df = recipes_frame(recipes)
    recent = df.head(RECENT_ACTIVITY)
    return {
        "total_recipes": len(df),
        "completed_recipes": int((df["status"] == "completed").sum()),
        "pending_recipes": int((df["status"] == "pending").sum()),
        "ai_generated_recipes": int(df["has_card"].sum()),
        "recent_activity": [
            {"title": row.title, "status": row.status, "created_at": row.created_at}
            for row in recent.itertuples(index=False)
        ],
    }


# ----------------------------------------------------------------------
# Admin export
# ----------------------------------------------------------------------
def _utc(value: Any) -> Optional[pd.Timestamp]:
    if value is None or value == "":
        return None
    stamp = pd.to_datetime(value, utc=True, errors="coerce")
    return None if pd.isna(stamp) else stamp


def _recipe_summary(r: Recipe) -> Dict[str, Any]:
    return {
        "id": r.id,
        "title": r.title,
        "status": r.status,
        "created_at": r.created_at,
        "prep_time": r.prep_time,
        "cook_time": r.cook_time,
        "servings": r.servings,
        "difficulty": r.difficulty,
        "cuisine_type": r.cuisine_type,
        "dietary_restrictions": list(r.dietary_restrictions),
    }


def _recipe_detail(r: Recipe) -> Dict[str, Any]:
    return {
        "id": r.id,
        "title": r.title,
        "description": r.description,
        "ingredients": [i.to_dict() for i in r.ingredients],
        "instructions": list(r.instructions),
        "prep_time": r.prep_time,
        "cook_time": r.cook_time,
        "servings": r.servings,
        "difficulty": r.difficulty,
        "cuisine_type": r.cuisine_type,
        "dietary_restrictions": list(r.dietary_restrictions),
        "status": r.status,
        "ai_generated_card": r.ai_generated_card,
        "created_at": r.created_at,
        "updated_at": r.updated_at,
    }


def _platform_usage(df: pd.DataFrame, user_created: Optional[pd.Timestamp], now: pd.Timestamp) -> Dict[str, Any]:
    age_seconds = (now - user_created).total_seconds() if user_created is not None else 0.0
    months = max(1, math.floor(age_seconds / (86400 * DAYS_PER_MONTH)))

    stamps = pd.to_datetime(df["created_at"], utc=True, errors="coerce", format="ISO8601")
    return {
        "account_age_days": math.floor(age_seconds / 86400),
        "recipes_per_month": len(df) / months if len(df) else 0,
        "most_active_month": _counts(stamps.dropna().dt.strftime("%B %Y")),
    }


def admin_report(
    recipes: Iterable[Recipe],
    user_info: Optional[Mapping[str, Any]] = None,
    now: Optional[datetime.datetime] = None,
) -> Dict[str, Any]:
    """
    Full analytics export for one user's recipes, as sent to the admin.

    `user_info` carries id, email, full_name, created_at and last_sign_in
    (missing keys become None). `recipes` are expected newest first, as
    RecipeStore.list_recipes returns them.
    """
    recipes = list(recipes)
    info = {key: (user_info or {}).get(key) for key in _USER_INFO_KEYS}
    now_ts = pd.Timestamp(now or datetime.datetime.now(datetime.timezone.utc))
    if now_ts.tzinfo is None:
        now_ts = now_ts.tz_localize("UTC")

    df = recipes_frame(recipes)
    total = len(df)

    def _avg(column: str) -> int:
        return _round_half_up(float(df[column].mean())) if total else 0

    return {
        "user_info": info,
        "recipe_statistics": {
            "total_recipes": total,
            "completed_recipes": int((df["status"] == "completed").sum()),
            "pending_recipes": int((df["status"] == "pending").sum()),
            "processing_recipes": int((df["status"] == "processing").sum()),
            "failed_recipes": int((df["status"] == "failed").sum()),
            "ai_generated_recipes": int(df["has_card"].sum()),
        },
        "cooking_analytics": {
            "average_prep_time": _avg("prep_time"),
            "average_cook_time": _avg("cook_time"),
            "total_cooking_time": int(df["total_time"].sum()),
            "average_servings": _avg("servings"),
        },
        "cuisine_breakdown": _counts(df["cuisine_type"]),
        "difficulty_breakdown": _counts(df["difficulty"]),
        "dietary_preferences": _counts(df["dietary_restrictions"].explode()),
        "recent_recipes": [_recipe_summary(r) for r in recipes[:REPORT_RECENT]],
        "detailed_recipes": [_recipe_detail(r) for r in recipes],
        "platform_usage": _platform_usage(df, _utc(info["created_at"]), now_ts),
    }
