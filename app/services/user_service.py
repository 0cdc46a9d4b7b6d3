import logging
from typing import List

from app.core.store import UserStore
from app.schemas.user import UserProfile
from app.utils.errors import UserNotFoundError

logger = logging.getLogger(__name__)


class UserService:
    @staticmethod
    def list_users(store: UserStore) -> List[UserProfile]:
        return store.all()

    @staticmethod
    def get_user(store: UserStore, user_id: str) -> UserProfile:
        user = store.find(user_id)
        if user is None:
            logger.info(f"User {user_id!r} not found")
            raise UserNotFoundError()
        return user

    @staticmethod
    def create_user(store: UserStore, payload: UserProfile) -> UserProfile:
        # ids are caller-assigned; empty and duplicate ids are stored as given
        user = store.append(payload)
        logger.info(f"Created user {user.id!r}")
        return user

    @staticmethod
    def update_user(store: UserStore, user_id: str, payload: UserProfile) -> UserProfile:
        """Replace name and emoji of ``user_id``; the body id is ignored."""
        user = store.update(user_id, full_name=payload.full_name, emoji=payload.emoji)
        if user is None:
            logger.info(f"User {user_id!r} not found for update")
            raise UserNotFoundError()
        logger.info(f"Updated user {user_id!r}")
        return user
