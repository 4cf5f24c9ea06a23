from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional

import bcrypt

from app.models import UserRecord
from app.repositories import UserRepository
from app.services.base import ConflictError, NotFoundError, ValidationError
from app.utils.clock import utc_timestamp
from app.utils.validators import (
    normalize_email,
    normalize_username,
    parse_user_id,
    validate_optional_string,
    validate_password_length,
    validate_required_fields,
)

logger = logging.getLogger(__name__)

REQUIRED_CREATE_FIELDS = ['username', 'email', 'password']
UPDATABLE_FIELDS = ('username', 'email', 'role', 'password')
DEFAULT_ROLE = 'user'


class UserService:
    """User registry: owns the user collection and its invariants.

    All operations run under one lock so uniqueness checks and id
    assignment cannot interleave between request threads.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        *,
        bcrypt_rounds: int = 12,
        clock: Callable[[], str] = utc_timestamp,
    ):
        self._user_repo = user_repo
        self._bcrypt_rounds = bcrypt_rounds
        self._clock = clock
        self._lock = threading.RLock()

    def list_all(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [record.to_public() for record in self._user_repo.list_all()]

    def count(self) -> int:
        with self._lock:
            return self._user_repo.count()

    def get_by_id(self, raw_id: Any) -> Dict[str, Any]:
        user_id = parse_user_id(raw_id)
        with self._lock:
            return self._require(user_id).to_public()

    def create(
        self,
        username: Any,
        email: Any,
        password: Any,
        role: Any = None,
    ) -> Dict[str, Any]:
        data = {'username': username, 'email': email, 'password': password, 'role': role}
        valid, error = validate_required_fields(data, REQUIRED_CREATE_FIELDS)
        if not valid:
            raise ValidationError(
                'Username, email, and password are required',
                details={'required': REQUIRED_CREATE_FIELDS, 'reason': error},
            )
        valid, error = validate_optional_string(data, 'role')
        if not valid:
            raise ValidationError(error)

        username = normalize_username(username)
        email = normalize_email(email)
        password_hash = self._hash_password(password)

        with self._lock:
            if self._user_repo.find_by_username_or_email(username, email):
                logger.warning("Rejected duplicate user registration for %s", username)
                raise ConflictError('Username or email already registered')

            record = UserRecord(
                id=self._user_repo.next_id(),
                username=username,
                email=email,
                role=role or DEFAULT_ROLE,
                created_at=self._clock(),
                password_hash=password_hash,
            )
            self._user_repo.add(record)

        logger.info("User %s created with id %s", record.username, record.id)
        return record.to_public()

    def update(self, raw_id: Any, updates: Any) -> Dict[str, Any]:
        """Merge the supplied fields onto a user, keeping its id and createdAt.

        Changed usernames and emails are stored as given; they are not
        re-checked for uniqueness.
        """
        user_id = parse_user_id(raw_id)
        if not isinstance(updates, dict):
            raise ValidationError('Request body must be a JSON object')
        for field in UPDATABLE_FIELDS:
            valid, error = validate_optional_string(updates, field)
            if not valid:
                raise ValidationError(error)

        changes = {
            field: updates[field]
            for field in ('username', 'email', 'role')
            if updates.get(field) is not None
        }
        ignored = sorted(set(updates) - set(UPDATABLE_FIELDS))
        if ignored:
            logger.debug("Ignoring non-updatable fields for user %s: %s", user_id, ignored)

        password = updates.get('password')
        if password:
            changes['password_hash'] = self._hash_password(password)

        with self._lock:
            existing = self._require(user_id)
            updated = replace(existing, **changes, id=user_id, updated_at=self._clock())
            self._user_repo.replace(updated)

        logger.info("User %s updated (%s)", user_id, ', '.join(sorted(changes)) or 'no field changes')
        return updated.to_public()

    def delete(self, raw_id: Any) -> Dict[str, Any]:
        user_id = parse_user_id(raw_id)
        with self._lock:
            self._require(user_id)
            deleted = self._user_repo.delete(user_id)

        logger.info("User %s (%s) deleted", deleted.id, deleted.username)
        return deleted.to_deleted()

    def verify_password(self, raw_id: Any, password: str) -> bool:
        """Check a password against the stored hash; False when none is stored."""
        user_id = parse_user_id(raw_id)
        with self._lock:
            record = self._require(user_id)
        if not record.password_hash or not password:
            return False
        return bcrypt.checkpw(password.encode('utf-8'), record.password_hash.encode('utf-8'))

    def _require(self, user_id: int) -> UserRecord:
        record: Optional[UserRecord] = self._user_repo.get_by_id(user_id)
        if record is None:
            raise NotFoundError(user_id)
        return record

    def _hash_password(self, password: str) -> str:
        valid, error = validate_password_length(password)
        if not valid:
            raise ValidationError(error)
        hashed = bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=self._bcrypt_rounds))
        return hashed.decode('utf-8')
