from pydantic import Field, NonNegativeInt

from gathering.models.base import WireModel


class DeckCard(WireModel):
    """One (card ID, quantity) line of a deck."""

    id: str
    quantity: NonNegativeInt


class Deck(WireModel):
    """
    A deck as listed by the client.

    Attributes:
        id: Deck identifier
        name: Display name
        description: Free-text description
        format: Arena format name
        resource_id: Client resource identifier
        deck_tile_id: Card ID shown on the deck tile
        main_deck: Maindeck lines, in client order
        sideboard: Sideboard lines, in client order
    """

    id: str = ""
    name: str = ""
    description: str = ""
    format: str = ""
    resource_id: str = Field(default="", alias="resourceId")
    deck_tile_id: int = Field(default=0, alias="deckTileId")
    main_deck: list[DeckCard] = Field(default_factory=list, alias="mainDeck")
    sideboard: list[DeckCard] = Field(default_factory=list)
