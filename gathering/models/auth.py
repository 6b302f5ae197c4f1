from pydantic import Field

from gathering.models.base import WireModel


class AuthRequestPayload(WireModel):
    """Only the player's display name is kept from the auth payload."""

    player_name: str = Field(alias="PlayerName")


class AuthRequest(WireModel):
    """The most recent authentication request sent by the client."""

    payload: AuthRequestPayload = Field(alias="Payload")

    @property
    def player_name(self) -> str:
        return self.payload.player_name
