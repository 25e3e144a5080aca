from roster.schemas.people import PersonPayload, PlayerOut, UserOut

__all__ = ["PersonPayload", "PlayerOut", "UserOut"]
