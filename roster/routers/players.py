from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response

from roster.domain.validation import require_valid
from roster.schemas.people import PersonPayload, PlayerOut
from roster.services.player_service import PlayerService

router = APIRouter(prefix="/api/player", tags=["player"])
logger = logging.getLogger(__name__)


def _get_player_service(request: Request) -> PlayerService:
    svc = getattr(getattr(request.app, "state", None), "player_service", None)
    if not svc:
        raise RuntimeError("PlayerService not configured")
    return svc


@router.get("", response_model=list[PlayerOut])
def list_players(request: Request):
    logger.info("Received request to GET /api/player")
    players = _get_player_service(request).list_all()
    logger.info("Successfully returned 200 OK for /api/player (%s rows)", len(players))
    return players


# Declared before /{player_id} so "random" is never read as an id.
@router.get("/random", response_model=PlayerOut)
def random_player(request: Request):
    logger.info("Received request to GET /api/player/random")
    player = _get_player_service(request).random_player()
    logger.info("Successfully returned 200 OK for /api/player/random (id=%s)", player.id)
    return player


@router.get("/{player_id}", response_model=PlayerOut)
def get_player(player_id: int, request: Request):
    logger.info("Received request to GET /api/player/%s", player_id)
    player = _get_player_service(request).get_by_id(player_id)
    logger.info("Successfully returned 200 OK for /api/player/%s", player_id)
    return player


@router.post("", response_model=PlayerOut, status_code=201)
def create_player(payload: PersonPayload, request: Request):
    logger.info("Received request to POST /api/player with json data: %s", payload.model_dump_json())
    require_valid(payload.model_dump())
    player = _get_player_service(request).create(payload)
    logger.info("Successfully returned 201 CREATED for /api/player/%s", player.id)
    return player


@router.put("/{player_id}", response_model=PlayerOut)
def update_player(player_id: int, payload: PersonPayload, request: Request):
    logger.info("Received request to PUT /api/player/%s with json data: %s", player_id, payload.model_dump_json())
    require_valid(payload.model_dump())
    player = _get_player_service(request).update(player_id, payload)
    logger.info("Successfully returned 200 OK for /api/player/%s", player_id)
    return player


@router.delete("/{player_id}", status_code=204, response_class=Response)
def delete_player(player_id: int, request: Request):
    logger.info("Received request to DELETE /api/player/%s", player_id)
    _get_player_service(request).delete(player_id)
    logger.info("Successfully returned 204 NO CONTENT for /api/player/%s", player_id)
    return Response(status_code=204)
