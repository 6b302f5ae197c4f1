"""
JSON extraction from log entries.

A payload runs from its payload line to the end of the entry and may be
pretty-printed over several lines. Most payloads are decoded strictly:
trailing whitespace is accepted, anything else fails. Some are followed by
unrelated lines before the next boundary marker; for those, backoff
extraction decodes the whole candidate text and, on failure, drops the last
line and retries until a decode succeeds or no lines remain. It never
decodes leading substrings of a line.
"""

import json
import logging
from typing import Any

from gathering.models.failure import DecodeFailureError, JSONNotFoundError, NotFoundError
from gathering.parsers.markers import PayloadRule
from gathering.parsers.segmenter import LogEntry

logger = logging.getLogger(__name__)


def extract_json(text: str, entity: str = "payload") -> Any:
    """
    Decode a JSON document that may be followed by trailing non-JSON lines.

    Args:
        text: Candidate text, JSON first
        entity: Name used in log messages and errors

    Returns:
        The decoded JSON value

    Raises:
        JSONNotFoundError: reason "empty" for empty input, "exhausted" when
            no trim depth decodes
    """
    if not text:
        logger.debug("%s: json backoff given an empty string", entity)
        raise JSONNotFoundError(entity, "empty")

    lines = text.split("\n")

    # At most one attempt per line
    while lines:
        candidate = "\n".join(lines)
        logger.debug("%s: parsing %d line(s)", entity, len(lines))
        try:
            return json.loads(candidate)
        except (json.JSONDecodeError, RecursionError):
            lines.pop()

    logger.debug("%s: json backoff ran out of lines", entity)
    raise JSONNotFoundError(entity, "exhausted")


def payload_text(entry: LogEntry, rule: PayloadRule) -> str | None:
    """
    Locate an entry's payload text: everything from the rule's payload line to
    the end of the entry, with the rule's prefix removed.

    Returns None when the entry is too short to hold the payload.
    """
    text = entry.tail(rule.offset)

    if text is None:
        return None

    if rule.prefix:
        text = text.removeprefix(rule.prefix)
    return text


def decode_payload(entry: LogEntry, rule: PayloadRule, entity: str) -> Any:
    """
    Decode an entry's JSON payload.

    Raises:
        NotFoundError: If the entry has no line at the payload offset
        DecodeFailureError: If the payload is not valid JSON, or nests too
            deeply to decode
    """
    text = payload_text(entry, rule)
    if text is None:
        raise NotFoundError(entity, f"entry {entry.index} has no payload at line {rule.offset}")

    if rule.tolerant:
        return extract_json(text, entity)

    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise DecodeFailureError(entity, str(exc)) from exc
