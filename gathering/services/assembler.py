"""
Upload payload assembly.

Runs every parser over one snapshot of the log text and collects the
results. A parser that finds nothing, or fails, leaves its field empty;
it never blocks the others.

Callers must serialize passes over the same log file. Passes hold no shared
state, but overlapping passes over successive snapshots will report the
same completed matches more than once.
"""

import logging
from collections.abc import Mapping

from gathering.models.payload import UploadPayload
from gathering.parsers.markers import DEFAULT_RULES, EventKind, PayloadRule
from gathering.parsers.match_accumulator import parse_matches
from gathering.parsers.snapshots import (
    parse_auth_request,
    parse_collection,
    parse_decks,
    parse_inventory,
    parse_rank_info,
)

logger = logging.getLogger(__name__)


def assemble_payload(
    raw: str,
    rules: Mapping[EventKind, PayloadRule] = DEFAULT_RULES,
) -> UploadPayload:
    """
    Build the upload payload from the full contents of the client log.

    Args:
        raw: Complete log text
        rules: Payload rule table shared by all parsers

    Returns:
        UploadPayload with each entity present only if it was found
    """
    matches = parse_matches(raw, rules)

    payload = UploadPayload(
        collection=parse_collection(raw, rules),
        decks=parse_decks(raw, rules),
        inventory=parse_inventory(raw, rules),
        rank=parse_rank_info(raw, rules),
        auth=parse_auth_request(raw, rules),
        matches=matches or None,
    )

    logger.debug("Assembled payload with: %s", ", ".join(payload.found()) or "nothing")
    return payload
