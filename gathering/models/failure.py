"""
Parse failure taxonomy.

Every parser outcome other than success falls into one of three kinds:

- NOT_FOUND: no matching entry in this log snapshot. Expected, not an error.
- DECODE_FAILURE: the matched entry's JSON could not be decoded, even after
  backoff trimming. Logged; the entity or fragment is skipped.
- MALFORMED_FRAGMENT: a match fragment that cannot be applied (an end with no
  candidate, or a required sub-object missing). Ignored.

None of these are fatal. Public parse functions catch them and degrade to
"entity not found" so one entity never blocks extraction of the others.
"""

from enum import Enum


class ParseFailureKind(str, Enum):
    """Classification of parse failures."""

    NOT_FOUND = "not_found"
    DECODE_FAILURE = "decode_failure"
    MALFORMED_FRAGMENT = "malformed_fragment"


class ParseFailure(Exception):
    """Base class for all parse failures."""

    kind: ParseFailureKind

    def __init__(self, entity: str, detail: str) -> None:
        self.entity = entity
        self.detail = detail
        super().__init__(f"{entity}: {detail}")


class NotFoundError(ParseFailure):
    """No log entry matched the entity's marker."""

    kind = ParseFailureKind.NOT_FOUND


class DecodeFailureError(ParseFailure):
    """The matched entry's payload could not be decoded."""

    kind = ParseFailureKind.DECODE_FAILURE


class JSONNotFoundError(DecodeFailureError):
    """
    Backoff extraction found no JSON document.

    reason is "empty" when the input was empty, "exhausted" when every
    trim depth failed to decode.
    """

    def __init__(self, entity: str, reason: str) -> None:
        self.reason = reason
        super().__init__(entity, f"no JSON found ({reason})")


class MalformedFragmentError(ParseFailure):
    """A match fragment that cannot be applied to the in-progress match."""

    kind = ParseFailureKind.MALFORMED_FRAGMENT
