from typing import Any

from pydantic import Field, NonNegativeInt, RootModel


class Collection(RootModel[dict[str, NonNegativeInt]]):
    """
    A player's card collection as logged by the client.

    Maps Arena card ID (string) to owned quantity.
    """

    root: dict[str, NonNegativeInt] = Field(default_factory=dict)

    @property
    def cards(self) -> dict[str, int]:
        return self.root

    def to_wire(self) -> dict[str, Any]:
        return dict(self.root)
