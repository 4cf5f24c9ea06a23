from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class UserRecord:
    id: int
    username: str
    email: str
    role: str = 'user'
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    password_hash: Optional[str] = None

    def to_public(self) -> Dict[str, Any]:
        """Projection safe to return to callers (no password material)."""
        data = {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'role': self.role,
            'createdAt': self.created_at,
        }
        if self.updated_at is not None:
            data['updatedAt'] = self.updated_at
        return data

    def to_deleted(self) -> Dict[str, Any]:
        return {'id': self.id, 'username': self.username}
