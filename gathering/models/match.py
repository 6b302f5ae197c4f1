"""
Match records assembled from course, start and end log fragments.

A completed Match is never mutated: applying an end fragment returns a copy.
"""

from pydantic import Field

from gathering.models.base import WireModel
from gathering.models.deck import Deck


class MatchResult(WireModel):
    """Result fields carried by a match-end fragment."""

    seat_id: int | None = Field(default=None, alias="seatId")
    team_id: int | None = Field(default=None, alias="teamId")
    game_number: int | None = Field(default=None, alias="gameNumber")
    winning_team_id: int | None = Field(default=None, alias="winningTeamId")
    winning_reason: str | None = Field(default=None, alias="winningReason")
    turn_count: int | None = Field(default=None, alias="turnCount")
    seconds_count: int | None = Field(default=None, alias="secondsCount")


class MatchEndParams(WireModel):
    payload_object: MatchResult | None = Field(default=None, alias="payloadObject")


class MatchEnd(WireModel):
    """Outer shape of the match-end fragment: {"params": {"payloadObject": {...}}}."""

    params: MatchEndParams | None = None


class Match(MatchResult):
    """
    A match in Arena.

    Start-fragment fields identify the match and opponent. Result fields are
    inherited from MatchResult and filled in by the end fragment. course_deck
    comes from a course fragment seen before the match started.
    """

    match_id: str | None = Field(default=None, alias="matchId")
    opponent_screen_name: str | None = Field(default=None, alias="opponentScreenName")
    opponent_is_wotc: bool | None = Field(default=None, alias="opponentIsWotc")
    opponent_ranking_class: str | None = Field(default=None, alias="opponentRankingClass")
    opponent_ranking_tier: int | None = Field(default=None, alias="opponentRankingTier")
    opponent_mythic_percentile: float | None = Field(
        default=None, alias="opponentMythicPercentile"
    )
    opponent_mythic_leaderboard_place: int | None = Field(
        default=None, alias="opponentMythicLeaderboardPlace"
    )
    event_id: str | None = Field(default=None, alias="eventId")
    course_deck: Deck | None = Field(default=None, alias="CourseDeck")

    def with_result(self, result: MatchResult) -> "Match":
        """Return a copy of this match with the end-fragment fields set."""
        return self.model_copy(update=dict(result))

    @property
    def won(self) -> bool | None:
        """Whether the player's team won, when both team IDs are known."""
        if self.team_id is None or self.winning_team_id is None:
            return None
        return self.team_id == self.winning_team_id
