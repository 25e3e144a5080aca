"""Exceptions raised by services/repositories and rendered by the error handlers."""

from __future__ import annotations


class RosterError(Exception):
    """Base exception for the roster workflow."""


class EntityNotFoundError(RosterError):
    """Raised when a record with the requested id does not exist."""

    kind = "Entity"
    details = "The requested entity does not exist"

    def __init__(self, entity_id: int) -> None:
        self.entity_id = entity_id
        super().__init__(f"{self.kind} with id {entity_id} not found")


class PlayerNotFoundError(EntityNotFoundError):
    kind = "Player"
    details = "The requested player does not exist"


class UserNotFoundError(EntityNotFoundError):
    kind = "User"
    details = "The requested user does not exist"


class ValidationFailedError(RosterError):
    """Raised when a request body breaks one or more field rules."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__("Validation failed")


class StorageConstraintError(RosterError):
    """Raised when the database rejects a write (unique or not-null violation)."""


class NoPlayersAvailableError(RosterError):
    """Raised when a random player is requested from an empty table."""

    def __init__(self, message: str = "No players available") -> None:
        super().__init__(message)
