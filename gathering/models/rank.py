from typing import Any

from pydantic import Field

from gathering.models.base import WireModel


class RankInfo(WireModel):
    """
    Constructed and limited rank tracks.

    Every field is optional: None means the key was not present in the
    snapshot, which is different from zero. Encoding keeps all keys and
    writes absent ones as null.
    """

    constructed_season_ordinal: int | None = Field(default=None, alias="constructedSeasonOrdinal")
    constructed_class: str | None = Field(default=None, alias="constructedClass")
    constructed_level: int | None = Field(default=None, alias="constructedLevel")
    constructed_step: int | None = Field(default=None, alias="constructedStep")
    constructed_matches_won: int | None = Field(default=None, alias="constructedMatchesWon")
    constructed_matches_lost: int | None = Field(default=None, alias="constructedMatchesLost")
    constructed_matches_drawn: int | None = Field(default=None, alias="constructedMatchesDrawn")
    limited_season_ordinal: int | None = Field(default=None, alias="limitedSeasonOrdinal")
    limited_class: str | None = Field(default=None, alias="limitedClass")
    limited_level: int | None = Field(default=None, alias="limitedLevel")
    limited_step: int | None = Field(default=None, alias="limitedStep")
    limited_matches_won: int | None = Field(default=None, alias="limitedMatchesWon")
    limited_matches_lost: int | None = Field(default=None, alias="limitedMatchesLost")
    limited_matches_drawn: int | None = Field(default=None, alias="limitedMatchesDrawn")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
