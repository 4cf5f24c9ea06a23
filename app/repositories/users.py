from __future__ import annotations

from typing import Iterable, List, Optional

from app.models import UserRecord


class UserRepository:
    """In-process storage for users, kept in insertion order.

    Not synchronized; callers that mutate it concurrently must hold a lock.
    """
    def __init__(self, records: Iterable[UserRecord] = ()):
        self._records: List[UserRecord] = list(records)
        self._last_id = max((r.id for r in self._records), default=0)

    def list_all(self) -> List[UserRecord]:
        return list(self._records)

    def count(self) -> int:
        return len(self._records)

    def next_id(self) -> int:
        # Ids are never handed out twice, even after deletes
        return self._last_id + 1

    def get_by_id(self, user_id: int) -> Optional[UserRecord]:
        for record in self._records:
            if record.id == user_id:
                return record
        return None

    def find_by_username_or_email(self, username: str, email: str) -> Optional[UserRecord]:
        username = username.lower()
        email = email.lower()
        for record in self._records:
            if record.username.lower() == username or record.email.lower() == email:
                return record
        return None

    def add(self, record: UserRecord) -> UserRecord:
        self._records.append(record)
        self._last_id = max(self._last_id, record.id)
        return record

    def replace(self, record: UserRecord) -> None:
        for index, existing in enumerate(self._records):
            if existing.id == record.id:
                self._records[index] = record
                return
        raise KeyError(record.id)

    def delete(self, user_id: int) -> Optional[UserRecord]:
        for index, record in enumerate(self._records):
            if record.id == user_id:
                return self._records.pop(index)
        return None
