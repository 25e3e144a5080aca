from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response

from roster.domain.validation import require_valid
from roster.schemas.people import PersonPayload, UserOut
from roster.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])
logger = logging.getLogger(__name__)


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


@router.get("", response_model=list[UserOut])
def list_users(request: Request):
    logger.info("Received request to GET /api/users")
    users = _get_user_service(request).list_all()
    logger.info("Successfully returned 200 OK for /api/users (%s rows)", len(users))
    return users


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, request: Request):
    logger.info("Received request to GET /api/users/%s", user_id)
    user = _get_user_service(request).get_by_id(user_id)
    logger.info("Successfully returned 200 OK for /api/users/%s", user_id)
    return user


@router.post("", response_model=UserOut, status_code=201)
def create_user(payload: PersonPayload, request: Request):
    logger.info("Received request to POST /api/users with json data: %s", payload.model_dump_json())
    require_valid(payload.model_dump())
    user = _get_user_service(request).create(payload)
    logger.info("Successfully returned 201 CREATED for /api/users/%s", user.id)
    return user


@router.put("/{user_id}", response_model=UserOut)
def update_user(user_id: int, payload: PersonPayload, request: Request):
    logger.info("Received request to PUT /api/users/%s with json data: %s", user_id, payload.model_dump_json())
    require_valid(payload.model_dump())
    user = _get_user_service(request).update(user_id, payload)
    logger.info("Successfully returned 200 OK for /api/users/%s", user_id)
    return user


@router.delete("/{user_id}", status_code=204, response_class=Response)
def delete_user(user_id: int, request: Request):
    logger.info("Received request to DELETE /api/users/%s", user_id)
    _get_user_service(request).delete(user_id)
    logger.info("Successfully returned 204 NO CONTENT for /api/users/%s", user_id)
    return Response(status_code=204)
