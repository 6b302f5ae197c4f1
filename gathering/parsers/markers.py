"""
Event markers and payload locations.

Each event kind has a marker pattern that identifies its log entry, the
boundary used to segment the log for it, and a PayloadRule describing where
its JSON sits inside the entry. The rule table is data: when the client's
log format drifts, pass a modified table to the parsers instead of changing
code.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum

from gathering.parsers.segmenter import COARSE_BOUNDARY, FINE_BOUNDARY


class EventKind(str, Enum):
    """Kinds of log events the parsers understand."""

    COLLECTION = "collection"
    DECK_LIST = "deck_list"
    INVENTORY = "inventory"
    RANK_INFO = "rank_info"
    AUTH = "auth"
    MATCH_COURSE = "match_course"
    MATCH_START = "match_start"
    MATCH_END = "match_end"


# Fragment kinds, in the order a single entry is handled when it matches several
FRAGMENT_KINDS: tuple[EventKind, ...] = (
    EventKind.MATCH_COURSE,
    EventKind.MATCH_START,
    EventKind.MATCH_END,
)

MARKER_PATTERNS: dict[EventKind, re.Pattern[str]] = {
    EventKind.COLLECTION: re.compile(r"<==\sPlayerInventory\.GetPlayerCardsV3\(\d*\)"),
    EventKind.DECK_LIST: re.compile(r"<==\sDeck\.GetDeckLists\(\d*\)"),
    EventKind.INVENTORY: re.compile(r"<==\sPlayerInventory\.GetPlayerInventory\(\d*\)"),
    EventKind.RANK_INFO: re.compile(r"<==\sEvent\.GetCombinedRankInfo\(\d*\)"),
    EventKind.AUTH: re.compile(r"ClientToMatchServiceMessageType_AuthenticateRequest"),
    EventKind.MATCH_COURSE: re.compile(r"<==\sEvent\.GetPlayerCourse\(\d*\)"),
    EventKind.MATCH_START: re.compile(r"Incoming\sEvent\.MatchCreated"),
    EventKind.MATCH_END: re.compile(r"DuelScene\.GameStop"),
}

MATCH_START_PREFIX = "(-1) Incoming Event.MatchCreated "


@dataclass(frozen=True, slots=True)
class PayloadRule:
    """
    Where an event's JSON payload sits inside its log entry.

    Attributes:
        offset: Line index of the payload. Line 0 is the rest of the marker line.
        boundary: Segmentation boundary that isolates this event
        prefix: Literal text stripped from the start of the payload line
        tolerant: Trim trailing non-JSON lines with backoff instead of
            decoding the payload text strictly
    """

    offset: int
    boundary: re.Pattern[str] = FINE_BOUNDARY
    prefix: str = ""
    tolerant: bool = False

    def with_offset(self, offset: int) -> "PayloadRule":
        return replace(self, offset=offset)


DEFAULT_RULES: dict[EventKind, PayloadRule] = {
    EventKind.COLLECTION: PayloadRule(offset=2, boundary=COARSE_BOUNDARY),
    EventKind.DECK_LIST: PayloadRule(offset=2, boundary=COARSE_BOUNDARY),
    EventKind.INVENTORY: PayloadRule(offset=2, boundary=COARSE_BOUNDARY),
    EventKind.RANK_INFO: PayloadRule(offset=2),
    EventKind.AUTH: PayloadRule(offset=1),
    EventKind.MATCH_COURSE: PayloadRule(offset=2, tolerant=True),
    EventKind.MATCH_START: PayloadRule(offset=1, prefix=MATCH_START_PREFIX),
    EventKind.MATCH_END: PayloadRule(offset=2),
}
