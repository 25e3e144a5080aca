"""User use cases."""

from __future__ import annotations

import logging

from roster.core.errors import UserNotFoundError
from roster.db.models import User
from roster.repositories.sql_repository import UserRepository
from roster.schemas.people import PersonPayload

logger = logging.getLogger(__name__)


class UserService:
    """Bridges the users router and the UserRepository."""

    def __init__(self, repository: UserRepository | None = None) -> None:
        self.repository = repository or UserRepository()

    def list_all(self) -> list[User]:
        logger.info("Listing all users")
        return self.repository.find_all()

    def get_by_id(self, user_id: int) -> User:
        logger.info("Fetching user id=%s", user_id)
        entity = self.repository.find_by_id(user_id)
        if entity is None:
            raise UserNotFoundError(user_id)
        return entity

    def create(self, payload: PersonPayload) -> User:
        logger.info("Creating user: %s", payload.model_dump())
        entity = User(name=payload.name, surname=payload.surname, email=payload.email)
        return self.repository.save(entity)

    def update(self, user_id: int, payload: PersonPayload) -> User:
        logger.info("Updating user id=%s with %s", user_id, payload.model_dump())
        entity = self.get_by_id(user_id)
        entity.name = payload.name
        entity.surname = payload.surname
        entity.email = payload.email
        return self.repository.save(entity)

    def delete(self, user_id: int) -> None:
        logger.info("Deleting user id=%s", user_id)
        self.repository.delete_by_id(user_id)
