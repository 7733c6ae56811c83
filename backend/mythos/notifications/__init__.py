"""Student notifications."""
from .messages import JourneyUpdate, compose_update, render_html, SUBJECT
from .email import EmailNotifier, NotificationError, get_notifier

__all__ = [
    'JourneyUpdate',
    'compose_update',
    'render_html',
    'SUBJECT',
    'EmailNotifier',
    'NotificationError',
    'get_notifier',
]
