# src/recipe_studio/notifications/admin_report.py
from __future__ import annotations

"""
admin_report.py

Purpose:
    Send a user's dashboard export (analytics.dashboard.admin_report) to the
    `send-admin-report` Supabase edge function.

    Payload shape:
        {
          "report_type": "user_dashboard_export",
          "user_email": "...",
          "user_id": "...",
          "analytics": {...},
          "timestamp": "2024-05-01T12:00:00+00:00",
          "requested_by": "..."
        }

    Best-effort like team notifications: a failed invoke is logged and
    reported as False.
"""

import datetime
from typing import Any, Dict, Optional

from supabase import Client

from recipe_studio.config import DEFAULT_REPORT_FUNCTION
from recipe_studio.logging_utils import get_logger

logger = get_logger(__name__)

REPORT_TYPE = "user_dashboard_export"


def build_report_payload(
    analytics: Dict[str, Any],
    *,
    user_email: Optional[str] = None,
    user_id: Optional[str] = None,
    timestamp: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "report_type": REPORT_TYPE,
        "user_email": user_email,
        "user_id": user_id,
        "analytics": analytics,
        "timestamp": timestamp or datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "requested_by": user_email,
    }


class AdminReporter:
    def __init__(self, client: Client, function_name: str = DEFAULT_REPORT_FUNCTION) -> None:
        self.client = client
        self.function_name = function_name

    def send(
        self,
        analytics: Dict[str, Any],
        *,
        user_email: Optional[str] = None,
        user_id: Optional[str] = None,
        timestamp: Optional[str] = None,
    ) -> bool:
        payload = build_report_payload(
            analytics, user_email=user_email, user_id=user_id, timestamp=timestamp
        )
        try:
            self.client.functions.invoke(self.function_name, invoke_options={"body": payload})
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Admin report for %s failed: %s",
                user_email or user_id,
                exc,
                extra={
                    "invoking_func": "send",
                    "invoking_purpose": "Send a dashboard export to the admin",
                    "next_step": "Report failure to caller",
                    "resolution": f"Check that edge function '{self.function_name}' is deployed",
                },
            )
            return False

        logger.info(
            "Sent dashboard export for %s (%d recipes)",
            user_email or user_id,
            analytics.get("recipe_statistics", {}).get("total_recipes", 0),
            extra={
                "invoking_func": "send",
                "invoking_purpose": "Send a dashboard export to the admin",
                "next_step": "Return to caller",
                "resolution": "",
            },
        )
        return True
