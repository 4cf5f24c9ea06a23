"""services package."""
from .base import (
    ConflictError,
    InternalError,
    InvalidIdentifierError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from .user_service import UserService

__all__ = [
    'ConflictError',
    'InternalError',
    'InvalidIdentifierError',
    'NotFoundError',
    'ServiceError',
    'UserService',
    'ValidationError',
]
