"""
Field validation helpers shared by the import parser and the resume operations.

These mirror the checks the editor applies before saving a resume, so an
imported value that passes here will also be accepted by the save path.
"""

import html
import re
from urllib.parse import urlparse


# ============================================================================
# Patterns
# ============================================================================

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^[\d\s()+-]{10,}$")


def is_valid_email(email: str) -> bool:
    """
    Loose email check: something@something.something with no whitespace.

    Examples:
    - "jane@x.com" → True
    - "jane@x" → False
    - "jane doe@x.com" → False
    """
    if not email:
        return False
    return EMAIL_RE.match(email) is not None


def is_valid_phone(phone: str) -> bool:
    """At least 10 characters drawn from digits, spaces, parens, plus and hyphen."""
    if not phone:
        return False
    return PHONE_RE.match(phone) is not None


def is_valid_url(url: str) -> bool:
    """True for absolute URLs such as "https://github.com/jane" (scheme + host required)."""
    if not url:
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    if not parsed.scheme:
        return False
    # mailto:, urn: and friends have no netloc but are still absolute URLs
    return bool(parsed.netloc) or parsed.scheme in {"mailto", "urn", "tel", "data"}


def sanitize_html(text: str) -> str:
    """Escape markup so user-entered text renders as text in the preview."""
    return html.escape(text, quote=False)
