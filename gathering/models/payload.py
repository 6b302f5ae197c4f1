from typing import Any

from pydantic import BaseModel, ConfigDict

from gathering.models.auth import AuthRequest
from gathering.models.collection import Collection
from gathering.models.deck import Deck
from gathering.models.inventory import PlayerInventory
from gathering.models.match import Match
from gathering.models.rank import RankInfo


class UploadPayload(BaseModel):
    """
    Latest value of each entity found in one read of the log.

    Every field is None when its parser found nothing. Absent fields are
    omitted from the encoded payload rather than sent as null.
    """

    model_config = ConfigDict(frozen=True)

    collection: Collection | None = None
    decks: list[Deck] | None = None
    inventory: PlayerInventory | None = None
    rank: RankInfo | None = None
    auth: AuthRequest | None = None
    matches: list[Match] | None = None

    def to_wire(self) -> dict[str, Any]:
        """Encode for upload."""
        wire: dict[str, Any] = {}

        if self.collection is not None:
            wire["collection"] = self.collection.to_wire()
        if self.decks is not None:
            wire["deck"] = [deck.to_wire() for deck in self.decks]
        if self.inventory is not None:
            wire["inventory"] = self.inventory.to_wire()
        if self.rank is not None:
            wire["rank"] = self.rank.to_wire()
        if self.auth is not None:
            wire["auth"] = self.auth.to_wire()
        if self.matches:
            wire["matches"] = [match.to_wire() for match in self.matches]

        return wire

    def found(self) -> list[str]:
        """Names of the entities present in this payload."""
        return [name for name in type(self).model_fields if getattr(self, name) is not None]
