"""Pydantic schemas for the Player and User resources."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class PersonPayload(BaseModel):
    """Request body for POST/PUT. ``id`` and unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    surname: Optional[str] = None
    email: Optional[str] = None


class PersonOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    surname: str
    email: str


class PlayerOut(PersonOut):
    pass


class UserOut(PersonOut):
    pass
