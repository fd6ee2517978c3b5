"""Post-match validation, sanitization and masking.

Design goals:
  - One-way: a masked email keeps only the first and last character of
    its local part
  - Deterministic: same address always masks to the same string
"""

from __future__ import annotations

_MASK = "***"

# Markers of script injection; matched case-insensitively
_UNSAFE_URL_MARKERS = ("<script>", "javascript:")


def has_consecutive_dots(email: str) -> bool:
    """True if the address contains "..", which the pattern lets through."""
    return ".." in email


def mask_email(email: str) -> str:
    """Mask the local part of an address.

    "john.doe@example.com" -> "j***e@example.com"
    "a@example.com"        -> "a***@example.com"
    """
    local, _, domain = email.partition("@")
    if len(local) > 1:
        return f"{local[0]}{_MASK}{local[-1]}@{domain}"
    return f"{local}{_MASK}@{domain}"


def is_safe_url(url: str) -> bool:
    """False if the URL carries an obvious script/javascript payload."""
    lowered = url.lower()
    return not any(marker in lowered for marker in _UNSAFE_URL_MARKERS)
