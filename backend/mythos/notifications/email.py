"""Send journey-update emails through the Resend API."""

import os
import logging
from typing import Optional

import resend

from .messages import SUBJECT, JourneyUpdate, render_html

logger = logging.getLogger(__name__)

RESEND_API_KEY = os.getenv("RESEND_API_KEY", "")
FROM_EMAIL = os.getenv("MYTHOS_FROM_EMAIL", "Mythos Ascendant <noreply@mythos-ascendant.app>")


class NotificationError(Exception):
    """Raised when an update email cannot be delivered."""


class EmailNotifier:
    """Deliver journey updates to students by email."""

    def __init__(self, api_key: Optional[str] = None, from_email: Optional[str] = None):
        self.api_key = api_key if api_key is not None else RESEND_API_KEY
        self.from_email = from_email or FROM_EMAIL

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def send(self, update: JourneyUpdate) -> str:
        """Send one update and return the provider's message id.

        Raises:
            NotificationError: If no API key is configured or delivery fails.
        """
        if not self.is_configured:
            raise NotificationError("Resend API key not configured. Set RESEND_API_KEY")

        resend.api_key = self.api_key
        params = {
            "from": self.from_email,
            "to": [update.recipient_email],
            "subject": SUBJECT,
            "html": render_html(update),
        }
        try:
            response = resend.Emails.send(params)
        except Exception as e:
            raise NotificationError(f"Failed to send to {update.recipient_email}: {e}") from e

        message_id = response.get("id") if response else None
        if not message_id:
            raise NotificationError(f"Failed to send to {update.recipient_email}: No response ID")
        logger.info(f"Sent journey update to {update.recipient_email} ({update.new_title}, {update.new_total_points} pts)")
        return message_id


_default_notifier: Optional[EmailNotifier] = None


def get_notifier() -> EmailNotifier:
    """Dependency returning the process-wide notifier."""
    global _default_notifier
    if _default_notifier is None:
        _default_notifier = EmailNotifier()
    return _default_notifier
