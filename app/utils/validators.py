"""Validation helpers for user registry input."""
from __future__ import annotations

import re
from typing import Any, Dict, List, Tuple

from app.services.base import InvalidIdentifierError

_USER_ID_PATTERN = re.compile(r'^\s*[+-]?\d+\s*$')

MAX_PASSWORD_BYTES = 72


def parse_user_id(raw_id: Any) -> int:
    """Parse a path or body identifier into an int.

    Accepts ints (not bools) and decimal strings with an optional sign.
    Raises InvalidIdentifierError for anything else.
    """
    if isinstance(raw_id, bool):
        raise InvalidIdentifierError(raw_id)
    if isinstance(raw_id, int):
        return raw_id
    if isinstance(raw_id, str) and _USER_ID_PATTERN.match(raw_id):
        return int(raw_id)
    raise InvalidIdentifierError(raw_id)


def validate_required_fields(data: Dict, required_fields: List[str]) -> Tuple[bool, str]:
    """Validate that required string fields are present and non-blank."""
    for field in required_fields:
        value = data.get(field)
        if value is None or value == '':
            return False, f"Missing required field: {field}"
        if not isinstance(value, str):
            return False, f"Field {field} must be a string"
        if not value.strip():
            return False, f"Missing required field: {field}"
    return True, ""


def validate_optional_string(data: Dict, field: str) -> Tuple[bool, str]:
    """Validate that an optional field, when supplied, is a string."""
    if field in data and data[field] is not None and not isinstance(data[field], str):
        return False, f"Field {field} must be a string"
    return True, ""


def validate_password_length(password: str, max_bytes: int = MAX_PASSWORD_BYTES) -> Tuple[bool, str]:
    """bcrypt only hashes the first 72 bytes and newer releases refuse longer input."""
    if len(password.encode('utf-8')) > max_bytes:
        return False, f"Password must be at most {max_bytes} bytes when UTF-8 encoded"
    return True, ""


def normalize_username(username: str) -> str:
    return username.strip()


def normalize_email(email: str) -> str:
    return email.strip().lower()
