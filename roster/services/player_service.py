"""Player use cases, including uniform random selection."""

from __future__ import annotations

import logging
import random
import threading

from roster.core.errors import NoPlayersAvailableError, PlayerNotFoundError
from roster.db.models import Player
from roster.repositories.sql_repository import PlayerRepository
from roster.schemas.people import PersonPayload

logger = logging.getLogger(__name__)

_local = threading.local()


def _thread_random() -> random.Random:
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng


class PlayerService:
    """Bridges the players router and the PlayerRepository."""

    def __init__(self, repository: PlayerRepository | None = None) -> None:
        self.repository = repository or PlayerRepository()

    def list_all(self) -> list[Player]:
        logger.info("Listing all players")
        return self.repository.find_all()

    def get_by_id(self, player_id: int) -> Player:
        logger.info("Fetching player id=%s", player_id)
        entity = self.repository.find_by_id(player_id)
        if entity is None:
            raise PlayerNotFoundError(player_id)
        return entity

    def create(self, payload: PersonPayload) -> Player:
        logger.info("Creating player: %s", payload.model_dump())
        entity = Player(name=payload.name, surname=payload.surname, email=payload.email)
        return self.repository.save(entity)

    def update(self, player_id: int, payload: PersonPayload) -> Player:
        logger.info("Updating player id=%s with %s", player_id, payload.model_dump())
        entity = self.get_by_id(player_id)
        entity.name = payload.name
        entity.surname = payload.surname
        entity.email = payload.email
        return self.repository.save(entity)

    def delete(self, player_id: int) -> None:
        logger.info("Deleting player id=%s", player_id)
        self.repository.delete_by_id(player_id)

    def random_player(self, rng: random.Random | None = None) -> Player:
        """
        Pick one existing player uniformly at random without loading the table.

        ``count`` and ``find_page`` are not atomic: a concurrent delete can
        leave the drawn offset past the end. That case is retried once with
        a fresh count before giving up.
        """
        rng = rng or _thread_random()
        for _ in range(2):
            total = self.repository.count()
            if total == 0:
                break
            offset = rng.randrange(total)
            page = self.repository.find_page(offset, 1)
            if page:
                return page[0]
            logger.warning("Random player offset %s of %s vanished, retrying", offset, total)
        raise NoPlayersAvailableError()
