"""Service-level error taxonomy mapped to HTTP responses at the route boundary."""
from __future__ import annotations

from typing import Any, Dict, Optional


class ServiceError(Exception):
    """Base error raised by services; carries the HTTP mapping."""

    status_code = 500
    error = 'Internal Server Error'

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(ServiceError):
    """Required input is missing or has the wrong type."""

    status_code = 400
    error = 'Validation failed'


class InvalidIdentifierError(ServiceError):
    status_code = 400
    error = 'Invalid user ID'

    def __init__(self, raw_id: Any):
        super().__init__('User ID must be a valid number')
        self.raw_id = raw_id


class NotFoundError(ServiceError):
    status_code = 404
    error = 'User not found'

    def __init__(self, user_id: int):
        super().__init__(f'User with ID {user_id} does not exist')
        self.user_id = user_id


class ConflictError(ServiceError):
    """Username or email already taken."""

    status_code = 409
    error = 'User already exists'


class InternalError(ServiceError):
    status_code = 500
    error = 'Internal Server Error'
