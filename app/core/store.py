"""In-memory user profile store.

The store is an ordered list of ``UserProfile`` records owned by a single
``UserStore`` instance. ``create_app`` builds one per application and keeps
it on ``app.state.store``; route handlers receive it through ``get_store``.
Every access goes through one lock, and reads hand out copies so callers
cannot change stored records behind the lock's back.
"""
import threading
from typing import Iterable, List, Optional

from fastapi import Request

from app.core.constants import DEMO_USERS
from app.schemas.user import UserProfile


class UserStore:
    def __init__(self, records: Optional[Iterable[UserProfile]] = None):
        self._lock = threading.Lock()
        self._records: List[UserProfile] = [r.model_copy() for r in records or ()]

    @classmethod
    def seeded(cls) -> "UserStore":
        return cls(UserProfile(id=i, fullName=name, emoji=emoji) for i, name, emoji in DEMO_USERS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def all(self) -> List[UserProfile]:
        with self._lock:
            return [r.model_copy() for r in self._records]

    def find(self, user_id: str) -> Optional[UserProfile]:
        """Return a copy of the first record with ``user_id``, or None."""
        with self._lock:
            record = self._find(user_id)
            return record.model_copy() if record else None

    def append(self, profile: UserProfile) -> UserProfile:
        with self._lock:
            self._records.append(profile.model_copy())
            return self._records[-1].model_copy()

    def update(self, user_id: str, full_name: str, emoji: str) -> Optional[UserProfile]:
        """Overwrite name and emoji of the first match; None if absent."""
        with self._lock:
            record = self._find(user_id)
            if record is None:
                return None
            record.full_name = full_name
            record.emoji = emoji
            return record.model_copy()

    def _find(self, user_id: str) -> Optional[UserProfile]:
        return next((r for r in self._records if r.id == user_id), None)


def get_store(request: Request) -> UserStore:
    """Dependency returning the application's store."""
    return request.app.state.store
