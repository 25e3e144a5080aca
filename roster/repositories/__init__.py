"""
Persistence adapters.

Services depend on these repositories rather than touching SQLAlchemy
sessions directly. Each repository is a typed CRUD gateway over one table.
"""

from .sql_repository import PlayerRepository, SQLRepository, UserRepository

__all__ = ["SQLRepository", "PlayerRepository", "UserRepository"]
