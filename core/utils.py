# core/utils.py

from datetime import datetime, timezone
from typing import Iterable, Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive values (SQLite hands them back without tzinfo)."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def sanitize(data: dict, numeric_fields: Optional[Iterable[str]] = None) -> dict:
    """
    Sanitize an incoming payload before schema validation:
    - Empty strings → None
    - Strip string whitespace
    - Preserve booleans, None values
    - For the given numeric fields, convert numeric strings to int
      (currency formatting like "$1,500" is accepted)
    """
    numeric = set(numeric_fields or ())
    clean = {}

    for k, v in data.items():
        # Preserve None
        if v is None:
            clean[k] = None
            continue

        # Preserve booleans
        if isinstance(v, bool):
            clean[k] = v
            continue

        if isinstance(v, str):
            stripped = v.strip()

            # Empty string → None
            if stripped == "":
                clean[k] = None
                continue

            if k in numeric:
                digits = stripped.replace("$", "").replace(",", "").replace(" ", "")
                if digits.lstrip("-").isdigit():
                    clean[k] = int(digits)
                    continue

            clean[k] = stripped
            continue

        # For other types, keep as-is
        clean[k] = v

    return clean


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so a search term is matched literally (escape char: backslash)."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
