"""
Per-kind entry classifiers.

Classifiers are pure predicates over a single entry's text. Course, start
and end fragment markers are disjoint by construction; fragment_kinds()
reports every kind that matched so overlap is visible to the caller.
"""

from gathering.parsers.markers import FRAGMENT_KINDS, MARKER_PATTERNS, EventKind
from gathering.parsers.segmenter import LogEntry


def matches(kind: EventKind, entry: LogEntry) -> bool:
    """Check whether an entry is an event of the given kind."""
    return MARKER_PATTERNS[kind].search(entry.text) is not None


def is_collection(entry: LogEntry) -> bool:
    return matches(EventKind.COLLECTION, entry)


def is_deck_list(entry: LogEntry) -> bool:
    return matches(EventKind.DECK_LIST, entry)


def is_inventory(entry: LogEntry) -> bool:
    return matches(EventKind.INVENTORY, entry)


def is_rank_info(entry: LogEntry) -> bool:
    return matches(EventKind.RANK_INFO, entry)


def is_auth(entry: LogEntry) -> bool:
    return matches(EventKind.AUTH, entry)


def is_match_course(entry: LogEntry) -> bool:
    return matches(EventKind.MATCH_COURSE, entry)


def is_match_start(entry: LogEntry) -> bool:
    return matches(EventKind.MATCH_START, entry)


def is_match_end(entry: LogEntry) -> bool:
    return matches(EventKind.MATCH_END, entry)


def fragment_kinds(entry: LogEntry) -> list[EventKind]:
    """
    Match-fragment kinds this entry satisfies, in handling order.

    Normally empty or a single kind.
    """
    return [kind for kind in FRAGMENT_KINDS if matches(kind, entry)]


def classify(entry: LogEntry) -> list[EventKind]:
    """All event kinds this entry satisfies."""
    return [kind for kind in EventKind if matches(kind, entry)]
