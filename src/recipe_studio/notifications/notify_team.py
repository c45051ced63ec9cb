# src/recipe_studio/notifications/notify_team.py
from __future__ import annotations

"""
notify_team.py

Purpose:
    Build the activity payloads sent to the `notify-team` Supabase edge
    function and invoke it.

    Payload shape (JSON body of the function call):
        {
          "activity_type": "recipe_created",
          "action": "Recipe Created",
          "user_email": "...",        # optional
          "user_id": "...",           # optional
          "recipe_title": "...",      # optional
          "recipe_id": "...",         # optional
          "timestamp": "2024-05-01T12:00:00+00:00"
        }

    Delivery to the team (e-mail etc.) happens inside the edge function and is
    not part of this package. Notifications are best-effort: a failed invoke is
    logged and reported as False, never raised to the caller.
"""

import datetime
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from supabase import Client

from recipe_studio.config import DEFAULT_NOTIFY_FUNCTION
from recipe_studio.logging_utils import get_logger

logger = get_logger(__name__)

# activity_type -> message template (fields come from TeamNotification)
MESSAGE_TEMPLATES: Dict[str, str] = {
    "recipe_created": 'New Recipe Created: "{recipe_title}" by {user_email}',
    "recipe_deleted": 'Recipe Deleted: "{recipe_title}" removed by {user_email}',
    "recipe_updated": 'Recipe Updated: "{recipe_title}" modified by {user_email}',
    "profile_updated": "Profile Updated: {user_email} changed their profile information",
    "password_changed": "Password Changed: {user_email} updated their password",
    "user_login": "User Login: {user_email} signed in",
    "user_logout": "User Logout: {user_email} signed out",
    "ai_recipe_generated": 'AI Recipe Generated: "{recipe_title}" by {user_email}',
}
ACTIVITY_TYPES = tuple(MESSAGE_TEMPLATES)

GENERIC_TEMPLATE = "User Activity: {action} by {user_email}"


@dataclass
class TeamNotification:
    activity_type: str
    action: str
    timestamp: str
    user_email: Optional[str] = None
    user_id: Optional[str] = None
    recipe_title: Optional[str] = None
    recipe_id: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for the edge function; unset fields are left out."""
        payload = {k: v for k, v in asdict(self).items() if v is not None and k != "details"}
        if self.details:
            payload["recipe_details"] = self.details
        return payload


def _utc_now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def build_notification(
    activity_type: str,
    action: str,
    *,
    user_email: Optional[str] = None,
    user_id: Optional[str] = None,
    recipe_title: Optional[str] = None,
    recipe_id: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    timestamp: Optional[str] = None,
) -> TeamNotification:
    return TeamNotification(
        activity_type=activity_type,
        action=action,
        timestamp=timestamp or _utc_now_iso(),
        user_email=user_email,
        user_id=user_id,
        recipe_title=recipe_title,
        recipe_id=recipe_id,
        details=dict(details or {}),
    )


def format_message(notification: TeamNotification) -> str:
    """Human readable one-liner for a notification."""
    template = MESSAGE_TEMPLATES.get(notification.activity_type, GENERIC_TEMPLATE)
    return template.format(
        action=notification.action,
        user_email=notification.user_email or "unknown user",
        recipe_title=notification.recipe_title or "Unknown Recipe",
    )


class TeamNotifier:
    def __init__(self, client: Client, function_name: str = DEFAULT_NOTIFY_FUNCTION) -> None:
        self.client = client
        self.function_name = function_name

    def send(self, notification: TeamNotification) -> bool:
        try:
            self.client.functions.invoke(
                self.function_name,
                invoke_options={"body": notification.to_payload()},
            )
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "notify-team call failed for %s: %s",
                notification.activity_type,
                exc,
                extra={
                    "invoking_func": "send",
                    "invoking_purpose": "Invoke the team notification edge function",
                    "next_step": "Continue without notifying the team",
                    "resolution": f"Check that edge function '{self.function_name}' is deployed",
                },
            )
            return False

        logger.info(
            "%s",
            format_message(notification),
            extra={
                "invoking_func": "send",
                "invoking_purpose": "Invoke the team notification edge function",
                "next_step": "Return to caller",
                "resolution": "",
            },
        )
        return True

    def notify(self, activity_type: str, action: str, **fields: Any) -> bool:
        return self.send(build_notification(activity_type, action, **fields))
