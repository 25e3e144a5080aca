"""
High-level use cases for the roster API.

Each service orchestrates one repository to implement the business rules of
its record kind. Routers call these services instead of touching the
database directly.
"""

from roster.services.player_service import PlayerService
from roster.services.user_service import UserService

__all__ = ["PlayerService", "UserService"]
