"""
Business logic for users.

``UserService`` wraps a ``UserRepository`` and adds the rules the
storage layer does not know about: lookups that must find a record
raise ``UserNotFoundError``, deletes verify the target exists first,
and updates merge only the fields that actually carry a new value.
"""

import logging
from typing import List, Optional

from ..core.exceptions import UserNotFoundError
from ..repositories.user_repository import UserRepository
from ..schemas.user import User

logger = logging.getLogger(__name__)


def _should_overwrite(incoming: Optional[str], current: Optional[str]) -> bool:
    """Return ``True`` if ``incoming`` is non-empty and differs from ``current``."""
    return incoming is not None and incoming != "" and incoming != current


class UserService:
    """Service for working with users.

    The repository is passed in explicitly; the service itself keeps no
    other state.  Sequences such as "check existence, then delete" are
    two independent repository calls and are not serialized against
    concurrent requests.
    """

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def list_users(self) -> List[User]:
        """Return all stored users."""
        return self.repository.list()

    def get_user_by_id(self, user_id: int) -> User:
        """Return the user with ``user_id`` or raise ``UserNotFoundError``."""
        user = self.repository.get(user_id)
        if user is None:
            logger.warning("User %s not found", user_id)
            raise UserNotFoundError(f"{user_id} not found")
        return user

    def get_user_by_name(self, name: str) -> User:
        """Return the user called ``name`` or raise ``UserNotFoundError``."""
        user = self.repository.get_by_name(name)
        if user is None:
            logger.warning("User named %r not found", name)
            raise UserNotFoundError(f"{name} not found")
        return user

    def insert_user(self, user: User) -> User:
        """Store a new user and return it with the id assigned by the store.

        Any id supplied by the caller is dropped so the store always
        generates one.  Names and e-mails are not checked for uniqueness.
        """
        saved = self.repository.save(user.model_copy(update={"id": None}))
        logger.info("Created user %s", saved.id)
        return saved

    def delete_by_id(self, user_id: int) -> None:
        """Delete the user with ``user_id``.

        Existence is checked before deleting; a missing id raises
        ``UserNotFoundError`` and nothing is deleted.
        """
        if not self.repository.exists(user_id):
            logger.warning("Cannot delete user %s: not found", user_id)
            raise UserNotFoundError(
                f"User with ID {user_id} does not exist and cannot be deleted."
            )
        self.repository.delete_by_id(user_id)
        logger.info("Deleted user %s", user_id)

    def delete_by_name(self, name: str) -> None:
        """Delete the user called ``name``.

        The record is looked up first and then deleted as a whole, since
        the repository has no delete-by-name primitive.
        """
        user = self.repository.get_by_name(name)
        if user is None:
            logger.warning("Cannot delete user named %r: not found", name)
            raise UserNotFoundError(
                f"User with name {name} does not exist and cannot be deleted."
            )
        self.repository.delete(user)
        logger.info("Deleted user %s (name %r)", user.id, name)

    def update_user(self, updated_user: User) -> None:
        """Merge ``updated_user`` into the stored record with the same id.

        ``name`` and ``email`` are overwritten only when the incoming
        value is non-empty and differs from the stored one; ``None`` or
        ``""`` leave the field untouched.  The record is saved exactly
        once even if nothing changed.
        """
        existing = None
        if updated_user.id is not None:
            existing = self.repository.get(updated_user.id)
        if existing is None:
            logger.warning("Cannot update user %s: not found", updated_user.id)
            raise UserNotFoundError(
                f"User with ID {updated_user.id} does not exist and cannot be updated."
            )

        if _should_overwrite(updated_user.name, existing.name):
            existing.name = updated_user.name
        if _should_overwrite(updated_user.email, existing.email):
            existing.email = updated_user.email

        self.repository.save(existing)
        logger.info("Updated user %s", existing.id)
