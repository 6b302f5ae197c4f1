from gathering.models.auth import AuthRequest, AuthRequestPayload
from gathering.models.collection import Collection
from gathering.models.deck import Deck, DeckCard
from gathering.models.failure import (
    DecodeFailureError,
    JSONNotFoundError,
    MalformedFragmentError,
    NotFoundError,
    ParseFailure,
    ParseFailureKind,
)
from gathering.models.inventory import PlayerInventory
from gathering.models.match import Match, MatchEnd, MatchEndParams, MatchResult
from gathering.models.payload import UploadPayload
from gathering.models.rank import RankInfo

__all__ = [
    "AuthRequest",
    "AuthRequestPayload",
    "Collection",
    "DecodeFailureError",
    "Deck",
    "DeckCard",
    "JSONNotFoundError",
    "MalformedFragmentError",
    "Match",
    "MatchEnd",
    "MatchEndParams",
    "MatchResult",
    "NotFoundError",
    "ParseFailure",
    "ParseFailureKind",
    "PlayerInventory",
    "RankInfo",
    "UploadPayload",
]
