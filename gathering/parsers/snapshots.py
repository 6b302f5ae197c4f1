"""
Snapshot parsers for single-fragment entities.

Each parser segments the log with its kind's boundary, keeps the LAST entry
matching the kind's marker, and decodes the JSON that runs from the kind's
payload line to the end of the entry.

The log is append-only, so a later snapshot supersedes every earlier one.
If the last snapshot is broken the entity is not found: parsers never fall
back to an earlier snapshot.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from gathering.models.auth import AuthRequest
from gathering.models.collection import Collection
from gathering.models.deck import Deck
from gathering.models.failure import DecodeFailureError, NotFoundError, ParseFailure
from gathering.models.inventory import PlayerInventory
from gathering.models.rank import RankInfo
from gathering.parsers.classifiers import matches
from gathering.parsers.json_extract import decode_payload
from gathering.parsers.markers import DEFAULT_RULES, EventKind, PayloadRule
from gathering.parsers.segmenter import LogEntry, segment

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DECK_LIST = TypeAdapter(list[Deck])


def find_last_entry(raw: str, kind: EventKind, rule: PayloadRule) -> LogEntry:
    """
    Find the last entry of `kind` that is long enough to carry its payload.

    Raises:
        NotFoundError: If no such entry exists
    """
    last: LogEntry | None = None

    for entry in segment(raw, rule.boundary):
        if not matches(kind, entry):
            continue
        # Too short to hold a payload: not a snapshot
        if entry.tail(rule.offset) is None:
            continue
        last = entry

    if last is None:
        raise NotFoundError(kind.value, "no matching entry")
    return last


def read_snapshot(
    raw: str,
    kind: EventKind,
    decode: Callable[[Any], T],
    rules: Mapping[EventKind, PayloadRule] = DEFAULT_RULES,
) -> T:
    """
    Locate and decode the latest snapshot of `kind`.

    Args:
        raw: Complete log text
        kind: Snapshot event kind
        decode: Converts the decoded JSON into the entity
        rules: Payload rule table

    Raises:
        NotFoundError: If the log has no snapshot of this kind
        DecodeFailureError: If the latest snapshot cannot be decoded
    """
    rule = rules[kind]
    entry = find_last_entry(raw, kind, rule)
    data = decode_payload(entry, rule, kind.value)

    try:
        return decode(data)
    except ValidationError as exc:
        raise DecodeFailureError(kind.value, str(exc)) from exc


def _parse(
    raw: str,
    kind: EventKind,
    decode: Callable[[Any], T],
    rules: Mapping[EventKind, PayloadRule],
) -> T | None:
    try:
        return read_snapshot(raw, kind, decode, rules)
    except NotFoundError as exc:
        logger.debug("%s not found: %s", kind.value, exc.detail)
    except ParseFailure as exc:
        logger.warning("Error parsing %s: %s", kind.value, exc.detail)
    return None


def parse_collection(
    raw: str, rules: Mapping[EventKind, PayloadRule] = DEFAULT_RULES
) -> Collection | None:
    """Latest card collection in the log, or None."""
    return _parse(raw, EventKind.COLLECTION, Collection.model_validate, rules)


def parse_decks(
    raw: str, rules: Mapping[EventKind, PayloadRule] = DEFAULT_RULES
) -> list[Deck] | None:
    """Latest deck list in the log, or None. An empty list is a valid snapshot."""
    return _parse(raw, EventKind.DECK_LIST, _DECK_LIST.validate_python, rules)


def parse_inventory(
    raw: str, rules: Mapping[EventKind, PayloadRule] = DEFAULT_RULES
) -> PlayerInventory | None:
    """Latest player inventory in the log, or None."""
    return _parse(raw, EventKind.INVENTORY, PlayerInventory.model_validate, rules)


def parse_rank_info(
    raw: str, rules: Mapping[EventKind, PayloadRule] = DEFAULT_RULES
) -> RankInfo | None:
    """Latest combined rank info in the log, or None."""
    return _parse(raw, EventKind.RANK_INFO, RankInfo.model_validate, rules)


def parse_auth_request(
    raw: str, rules: Mapping[EventKind, PayloadRule] = DEFAULT_RULES
) -> AuthRequest | None:
    """Latest authentication request (for the player's name), or None."""
    return _parse(raw, EventKind.AUTH, AuthRequest.model_validate, rules)
