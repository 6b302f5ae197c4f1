import json
from typing import Any

import pytest

TIMESTAMP = "1/21/2019 8:14:22 PM"
AUTH_MESSAGE_TYPE = "ClientToMatchServiceMessageType_AuthenticateRequest"


class LogBuilder:
    """Builds synthetic MTG Arena client log text, one event at a time."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def raw(self, text: str) -> "LogBuilder":
        self._parts.append(text)
        return self

    def _response(self, method: str, body: Any) -> "LogBuilder":
        payload = body if isinstance(body, str) else json.dumps(body)
        return self.raw(f"[UnityCrossThreadLogger]{TIMESTAMP}\n<== {method}\n{payload}\n")

    def collection(self, cards: Any) -> "LogBuilder":
        return self._response("PlayerInventory.GetPlayerCardsV3(12)", cards)

    def decks(self, decks: Any) -> "LogBuilder":
        return self._response("Deck.GetDeckLists(13)", decks)

    def inventory(self, inventory: Any) -> "LogBuilder":
        return self._response("PlayerInventory.GetPlayerInventory(14)", inventory)

    def rank(self, rank: Any) -> "LogBuilder":
        return self._response("Event.GetCombinedRankInfo(15)", rank)

    def auth(self, player_name: str) -> "LogBuilder":
        body = {
            "ClientToMatchServiceMessageType": AUTH_MESSAGE_TYPE,
            "Payload": {"PlayerName": player_name, "ClientVersion": "1.0"},
        }
        marker = f"[Client GRE]{TIMESTAMP}: Match to 7A8C: {AUTH_MESSAGE_TYPE}"
        return self.raw(f"{marker}\n{json.dumps(body)}\n")

    def course(self, deck: dict[str, Any] | None, noise: str = "") -> "LogBuilder":
        body: dict[str, Any] = {"Id": "course-1", "InternalEventName": "Ladder"}
        if deck is not None:
            body["CourseDeck"] = deck
        text = json.dumps(body, indent=2)
        return self._response("Event.GetPlayerCourse(20)", text + ("\n" + noise if noise else ""))

    def start(self, match_id: str, indent: int | None = None, **fields: Any) -> "LogBuilder":
        body = {
            "matchId": match_id,
            "opponentScreenName": "Opponent#12345",
            "opponentIsWotc": False,
            "opponentRankingClass": "Gold",
            "opponentRankingTier": 2,
            "opponentMythicPercentile": 0.0,
            "opponentMythicLeaderboardPlace": 0,
            "eventId": "Ladder",
            **fields,
        }
        return self.raw(
            f"[UnityCrossThreadLogger]{TIMESTAMP}\n"
            f"(-1) Incoming Event.MatchCreated {json.dumps(body, indent=indent)}\n"
        )

    def end(self, indent: int | None = None, **result: Any) -> "LogBuilder":
        payload_object = {
            "seatId": 1,
            "teamId": 1,
            "gameNumber": 1,
            "winningTeamId": 1,
            "winningReason": "ResultReason_Concede",
            "turnCount": 9,
            "secondsCount": 412,
            **result,
        }
        body = {"params": {"messageName": "DuelScene.GameStop", "payloadObject": payload_object}}
        text = json.dumps(body, indent=indent)
        return self.raw(f"[UnityCrossThreadLogger]{TIMESTAMP}\n==> Log.Info(53):\n{text}\n")

    def noise(self, text: str = "Loading scene Home") -> "LogBuilder":
        return self.raw(f"[UnityCrossThreadLogger]{TIMESTAMP}\n{text}\n")

    def text(self) -> str:
        return "".join(self._parts)


@pytest.fixture
def log() -> LogBuilder:
    """Fresh builder for synthetic client log text."""
    return LogBuilder()


@pytest.fixture
def sample_deck() -> dict[str, Any]:
    return {
        "id": "7d1c1cd4-2e3e-4a2c-9f7b-8e0b3a6c1f11",
        "name": "Mono Red",
        "description": "",
        "format": "Standard",
        "resourceId": "a6f0d1c2-1111-2222-3333-444455556666",
        "deckTileId": 68464,
        "mainDeck": [{"id": "68464", "quantity": 4}, {"id": "67023", "quantity": 20}],
        "sideboard": [{"id": "66091", "quantity": 2}],
    }


@pytest.fixture
def sample_rank() -> dict[str, Any]:
    return {
        "constructedSeasonOrdinal": 4,
        "constructedClass": "Gold",
        "constructedLevel": 2,
        "constructedStep": 3,
        "constructedMatchesWon": 12,
        "constructedMatchesLost": 8,
        "constructedMatchesDrawn": 0,
        "limitedSeasonOrdinal": 4,
        "limitedClass": "Silver",
        "limitedLevel": 1,
        "limitedStep": 0,
        "limitedMatchesWon": 3,
        "limitedMatchesLost": 2,
        "limitedMatchesDrawn": 0,
    }


@pytest.fixture
def sample_inventory() -> dict[str, Any]:
    return {
        "playerId": "ABCDEF123456",
        "wcCommon": 10,
        "wcUncommon": 7,
        "wcRare": 3,
        "wcMythic": 1,
        "gold": 4350,
        "gems": 1200,
        "draftTokens": 0,
        "sealedTokens": 1,
        "wcTrackPosition": 5,
        "vaultProgress": 0.384,
    }
