from gathering.parsers.classifiers import classify, fragment_kinds, matches
from gathering.parsers.json_extract import extract_json
from gathering.parsers.markers import DEFAULT_RULES, EventKind, PayloadRule
from gathering.parsers.match_accumulator import MatchAccumulator, accumulate, parse_matches
from gathering.parsers.segmenter import COARSE_BOUNDARY, FINE_BOUNDARY, LogEntry, segment
from gathering.parsers.snapshots import (
    parse_auth_request,
    parse_collection,
    parse_decks,
    parse_inventory,
    parse_rank_info,
)

__all__ = [
    "COARSE_BOUNDARY",
    "DEFAULT_RULES",
    "EventKind",
    "FINE_BOUNDARY",
    "LogEntry",
    "MatchAccumulator",
    "PayloadRule",
    "accumulate",
    "classify",
    "extract_json",
    "fragment_kinds",
    "matches",
    "parse_auth_request",
    "parse_collection",
    "parse_decks",
    "parse_inventory",
    "parse_matches",
    "parse_rank_info",
    "segment",
]
