"""
Tests for dashboard analytics.
"""

import datetime

from recipe_studio.analytics.dashboard import (
    admin_report,
    dashboard_stats,
    recipes_frame,
    user_activity_summary,
)


class TestDashboardStats:
    def test_empty(self):
        stats = dashboard_stats([])
        assert stats.total_recipes == 0
        assert stats.completion_rate == 0
        assert stats.avg_total_minutes == 0
        assert stats.cuisine_counts == {}
        assert stats.top_cuisines == []

    def test_totals(self, sample_recipes):
        stats = dashboard_stats(sample_recipes)
        assert stats.total_recipes == 3
        assert stats.completed_recipes == 2
        assert stats.completion_rate == 67
        assert stats.avg_total_minutes == 30

    def test_breakdowns(self, sample_recipes):
        stats = dashboard_stats(sample_recipes)
        assert stats.cuisine_counts == {"Italian": 2, "Mediterranean": 1}
        assert stats.difficulty_counts == {"medium": 1, "easy": 1, "hard": 1}
        assert stats.dietary_counts == {"Vegetarian": 2, "Low-Carb": 1}
        assert stats.top_cuisines == [("Italian", 2), ("Mediterranean", 1)]

    def test_months(self, sample_recipes):
        stats = dashboard_stats(sample_recipes)
        assert stats.monthly_counts == {"Jan 2024": 1, "Feb 2024": 2}
        assert stats.recent_months == [("Jan 2024", 1), ("Feb 2024", 2)]

    def test_frame_columns(self, sample_recipes):
        df = recipes_frame(sample_recipes)
        assert list(df["total_time"]) == [30, 15, 45]
        assert list(df["has_card"]) == [True, False, True]


class TestUserActivitySummary:
    def test_summary(self, sample_recipes):
        summary = user_activity_summary(sample_recipes)
        assert summary["total_recipes"] == 3
        assert summary["completed_recipes"] == 2
        assert summary["pending_recipes"] == 1
        assert summary["ai_generated_recipes"] == 2
        assert [a["title"] for a in summary["recent_activity"]] == [
            "Creamy Mushroom Garlic Pasta",
            "Classic Caesar Salad",
            "Creamy Butter Chicken",
        ]

    def test_recent_activity_capped(self, sample_recipes):
        summary = user_activity_summary(sample_recipes * 3)
        assert len(summary["recent_activity"]) == 5


class TestAdminReport:
    NOW = datetime.datetime(2024, 3, 1, 12, 0, tzinfo=datetime.timezone.utc)
    USER = {"id": "u1", "email": "cook@example.com", "created_at": "2024-01-01T00:00:00+00:00"}

    def test_statistics(self, sample_recipes):
        report = admin_report(sample_recipes, self.USER, now=self.NOW)
        assert report["recipe_statistics"] == {
            "total_recipes": 3,
            "completed_recipes": 2,
            "pending_recipes": 1,
            "processing_recipes": 0,
            "failed_recipes": 0,
            "ai_generated_recipes": 2,
        }
        assert report["cooking_analytics"] == {
            "average_prep_time": 13,
            "average_cook_time": 17,
            "total_cooking_time": 90,
            "average_servings": 3,
        }

    def test_breakdowns(self, sample_recipes):
        report = admin_report(sample_recipes, self.USER, now=self.NOW)
        assert report["cuisine_breakdown"] == {"Italian": 2, "Mediterranean": 1}
        assert report["difficulty_breakdown"] == {"medium": 1, "easy": 1, "hard": 1}
        assert report["dietary_preferences"] == {"Vegetarian": 2, "Low-Carb": 1}

    def test_user_info_and_usage(self, sample_recipes):
        report = admin_report(sample_recipes, self.USER, now=self.NOW)
        assert report["user_info"] == {
            "id": "u1",
            "email": "cook@example.com",
            "full_name": None,
            "created_at": "2024-01-01T00:00:00+00:00",
            "last_sign_in": None,
        }
        usage = report["platform_usage"]
        assert usage["account_age_days"] == 60
        assert usage["recipes_per_month"] == 1.5
        assert usage["most_active_month"] == {"January 2024": 1, "February 2024": 2}

    def test_recipe_lists(self, sample_recipes):
        report = admin_report(sample_recipes * 4, self.USER, now=self.NOW)
        assert len(report["recent_recipes"]) == 10
        assert len(report["detailed_recipes"]) == 12
        detail = report["detailed_recipes"][0]
        assert detail["ingredients"][0] == {
            "name": "Pasta (penne or fettuccine)", "amount": "12", "unit": "oz",
        }
        assert detail["ai_generated_card"] == "Earthy and rich."

    def test_no_recipes_no_user(self):
        report = admin_report([], now=self.NOW)
        assert report["recipe_statistics"]["total_recipes"] == 0
        assert report["cooking_analytics"]["average_prep_time"] == 0
        assert report["cuisine_breakdown"] == {}
        assert report["recent_recipes"] == []
        assert report["platform_usage"] == {
            "account_age_days": 0,
            "recipes_per_month": 0,
            "most_active_month": {},
        }
