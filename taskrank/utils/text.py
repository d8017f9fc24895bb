"""
Text helpers — canonical form for strings used as lookup keys.
"""

from typing import Optional


def normalize_string(value: Optional[str]) -> str:
    """Lower-case and strip a string; None becomes the empty string."""
    if value is None:
        return ""
    return str(value).lower().strip()
