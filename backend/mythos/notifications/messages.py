"""Compose journey-update messages from resolved titles."""

import logging
from dataclasses import dataclass
from html import escape
from urllib.parse import quote

from ..scoring.images import DEFAULT_LOGO_URL, normalize_image_url, resolve_logo_url, validate_image_url
from ..scoring.tiers import Tier

logger = logging.getLogger(__name__)

SUBJECT = "Mythos Ascendant: Your Journey Update!"


@dataclass(frozen=True)
class JourneyUpdate:
    """Everything a notifier needs to tell a student about their progress."""
    recipient_email: str
    new_total_points: int
    old_title: str
    new_title: str
    message: str
    badge_image_url: str
    main_logo_url: str = DEFAULT_LOGO_URL

    @property
    def is_level_up(self) -> bool:
        return self.old_title != self.new_title


def _badge_url(tier: Tier) -> str:
    url = normalize_image_url(tier.image_url)
    if validate_image_url(url):
        return url
    logger.debug(f"Badge for '{tier.title}' failed validation, using fallback")
    return f"https://placehold.co/150x150?text={quote(tier.title)}"


def compose_update(
    recipient_email: str,
    new_total_points: int,
    old_tier: Tier,
    new_tier: Tier,
    main_logo_url: str = "",
) -> JourneyUpdate:
    """Build the update for a student whose total moved from ``old_tier`` to ``new_tier``."""
    if old_tier.title != new_tier.title:
        message = new_tier.message
    else:
        message = (
            f"You've earned new points! Your total is now {new_total_points}. "
            f"Keep going to reach the next title: {new_tier.title}."
        )
    return JourneyUpdate(
        recipient_email=recipient_email,
        new_total_points=new_total_points,
        old_title=old_tier.title,
        new_title=new_tier.title,
        message=message,
        badge_image_url=_badge_url(new_tier),
        main_logo_url=resolve_logo_url(main_logo_url) or DEFAULT_LOGO_URL,
    )


def render_html(update: JourneyUpdate) -> str:
    """Render a minimal HTML body for an update."""
    heading = "You've leveled up!" if update.is_level_up else "Your journey continues!"
    return (
        '<div style="font-family: Georgia, serif; text-align: center;">'
        f'<img src="{escape(update.main_logo_url)}" alt="Mythos Ascendant" width="96">'
        f"<h2>{heading}</h2>"
        f'<img src="{escape(update.badge_image_url)}" alt="{escape(update.new_title)}" width="150">'
        f"<h3>{escape(update.new_title)}</h3>"
        f"<p>{escape(update.message)}</p>"
        f"<p>Total points: <strong>{update.new_total_points}</strong></p>"
        "</div>"
    )
