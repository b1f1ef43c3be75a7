from __future__ import annotations

import uuid

from utils.exceptions import BadRequest


def normalize_email(value):
    return value.strip().lower() if isinstance(value, str) else value


def parse_uuid(raw: str | None, name: str = "id") -> str:
    """Canonical UUID string, or BadRequest."""
    try:
        return str(uuid.UUID(str(raw)))
    except (TypeError, ValueError):
        raise BadRequest(f"Invalid {name}")


def parse_optional_uuid(raw: str | None) -> str | None:
    # unparsable filters are ignored rather than rejected
    if not raw:
        return None
    try:
        return str(uuid.UUID(raw))
    except ValueError:
        return None
