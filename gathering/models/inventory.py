from pydantic import Field, NonNegativeFloat

from gathering.models.base import WireModel


class PlayerInventory(WireModel):
    """Wildcards, currencies and progress counters for the logged-in player."""

    player_id: str = Field(default="", alias="playerId")
    wc_common: int = Field(default=0, alias="wcCommon")
    wc_uncommon: int = Field(default=0, alias="wcUncommon")
    wc_rare: int = Field(default=0, alias="wcRare")
    wc_mythic: int = Field(default=0, alias="wcMythic")
    gold: int = 0
    gems: int = 0
    draft_tokens: int = Field(default=0, alias="draftTokens")
    sealed_tokens: int = Field(default=0, alias="sealedTokens")
    wc_track_position: int = Field(default=0, alias="wcTrackPosition")
    vault_progress: NonNegativeFloat = Field(default=0.0, alias="vaultProgress")
