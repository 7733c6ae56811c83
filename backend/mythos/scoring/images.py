"""Badge and logo image URL handling.

Teachers paste Google Drive share links into the title table; those are
rewritten to Drive's direct-view form so they render inside email.
"""

import logging
import re
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

PLACEHOLDER_BADGE_URL = "https://placehold.co/150x150?text=Badge"
DEFAULT_LOGO_URL = "https://img.icons8.com/color/96/000000/mythology.png"
DRIVE_VIEW_URL = "https://drive.google.com/uc?export=view&id={file_id}"

_FILE_ID_PATTERN = re.compile(r"/file/d/([a-zA-Z0-9_-]+)")
_QUERY_ID_PATTERN = re.compile(r"[?&]id=([a-zA-Z0-9_-]+)")
_LEGACY_ID_PATTERN = re.compile(r"/d/([a-zA-Z0-9_-]+)")
_IMAGE_SUFFIX = re.compile(r"\.(jpg|jpeg|png|gif|webp)$", re.IGNORECASE)


def _has_image_suffix(url: str) -> bool:
    return bool(_IMAGE_SUFFIX.search(urlsplit(url).path) or _IMAGE_SUFFIX.search(url))


def _drive_file_id(url: str):
    match = _FILE_ID_PATTERN.search(url)
    if match:
        return match.group(1)
    if "drive.google.com" not in url:
        return None
    match = _QUERY_ID_PATTERN.search(url) or _LEGACY_ID_PATTERN.search(url)
    return match.group(1) if match else None


def normalize_image_url(raw_url) -> str:
    """Convert a Drive share link to a direct-view URL.

    Direct image links and Drive ``uc`` links pass through unchanged;
    anything unrecognized becomes the placeholder badge. Never raises.
    """
    if not raw_url or not isinstance(raw_url, str):
        return PLACEHOLDER_BADGE_URL
    url = raw_url.strip()
    try:
        file_id = _drive_file_id(url)
        if file_id:
            return DRIVE_VIEW_URL.format(file_id=file_id)
        if "drive.google.com/uc" in url or _has_image_suffix(url):
            return url
    except ValueError as e:
        logger.debug(f"Could not parse image URL {url!r}: {e}")
    logger.debug(f"Unknown image URL format {url!r}, using placeholder")
    return PLACEHOLDER_BADGE_URL


def validate_image_url(url) -> bool:
    """Check that a URL looks like something an email client can display."""
    if not url or not isinstance(url, str):
        return False
    if not url.startswith(("http://", "https://")):
        return False
    if "drive.google.com" in url:
        return any(form in url for form in ("uc?export=view&id=", "/file/d/", "/open?id="))
    try:
        return _has_image_suffix(url) or "placehold.co" in url or "placeholder" in url
    except ValueError:
        return False


def resolve_logo_url(raw_url) -> str:
    """Normalized main logo URL, or an empty string when there is no usable logo.

    Unrecognized formats normalize to the placeholder badge, which is
    still a displayable image, so it is returned like any other valid URL.
    """
    if not raw_url:
        return ""
    url = normalize_image_url(raw_url)
    if validate_image_url(url):
        return url
    logger.debug(f"Main logo URL {raw_url!r} failed validation")
    return ""
