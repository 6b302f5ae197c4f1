"""
Match accumulation.

A match is spread over three non-adjacent log events with no reliable
correlation ID between them:

    <== Event.GetPlayerCourse(n)       course: deck used to enter the queue
    Incoming Event.MatchCreated {...}  start: match ID, opponent, event
    DuelScene.GameStop                 end: seat, team, winner, duration

Fragments are correlated by order of appearance. The accumulator holds a
single candidate slot (Idle when empty, Building when set):

- course: clears the slot, then fills it with a new candidate carrying the
  course deck. A course that fails to decode leaves the slot empty.
- start: replaces the candidate with a fresh one built from the start
  payload, keeping the course deck of the candidate it replaces. A start
  that fails to decode leaves the slot untouched.
- end: with a candidate, copies the result fields onto it, emits the
  completed match and empties the slot. Without one it is ignored, since
  the client may have been started mid-match.

A second start before any end discards the first candidate. That is the only
way an in-progress match is lost.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping

from pydantic import ValidationError

from gathering.models.deck import Deck
from gathering.models.failure import (
    DecodeFailureError,
    MalformedFragmentError,
    NotFoundError,
    ParseFailure,
)
from gathering.models.match import Match, MatchEnd
from gathering.parsers.classifiers import fragment_kinds
from gathering.parsers.json_extract import decode_payload
from gathering.parsers.markers import DEFAULT_RULES, EventKind, PayloadRule
from gathering.parsers.segmenter import LogEntry, segment

logger = logging.getLogger(__name__)


class MatchAccumulator:
    """
    Single-slot state machine that turns match fragments into matches.

    Usage:
        accumulator = MatchAccumulator()
        for entry in segment(raw, FINE_BOUNDARY):
            completed = accumulator.feed(entry)
        matches = accumulator.completed

    One accumulator serves one parse pass. It holds no state between passes.
    """

    def __init__(self, rules: Mapping[EventKind, PayloadRule] = DEFAULT_RULES) -> None:
        self._rules = rules
        self._candidate: Match | None = None
        self.completed: list[Match] = []

    @property
    def candidate(self) -> Match | None:
        """The in-progress match, if any."""
        return self._candidate

    @property
    def building(self) -> bool:
        return self._candidate is not None

    def feed(self, entry: LogEntry) -> Match | None:
        """
        Process one log entry.

        Returns:
            The match completed by this entry, or None
        """
        kinds = fragment_kinds(entry)
        if not kinds:
            return None
        if len(kinds) > 1:
            logger.warning(
                "Entry %d matches several match fragments: %s",
                entry.index,
                ", ".join(kind.value for kind in kinds),
            )

        finished: Match | None = None
        for kind in kinds:
            try:
                if kind is EventKind.MATCH_COURSE:
                    self._on_course(entry)
                elif kind is EventKind.MATCH_START:
                    self._on_start(entry)
                else:
                    finished = self._on_end(entry) or finished
            except MalformedFragmentError as exc:
                logger.debug("Ignoring %s: %s", kind.value, exc.detail)
            except ParseFailure as exc:
                logger.warning("Error parsing %s: %s", kind.value, exc.detail)

        return finished

    def _decode(self, entry: LogEntry, kind: EventKind) -> object:
        try:
            return decode_payload(entry, self._rules[kind], kind.value)
        except NotFoundError as exc:
            raise DecodeFailureError(kind.value, exc.detail) from exc

    def _on_course(self, entry: LogEntry) -> None:
        self._drop_candidate("course")

        data = self._decode(entry, EventKind.MATCH_COURSE)
        if not isinstance(data, dict):
            raise DecodeFailureError(EventKind.MATCH_COURSE.value, "payload is not an object")

        deck_data = data.get("CourseDeck")
        try:
            deck = Deck.model_validate(deck_data) if deck_data is not None else None
        except ValidationError as exc:
            raise DecodeFailureError(EventKind.MATCH_COURSE.value, str(exc)) from exc

        self._candidate = Match(course_deck=deck)

    def _on_start(self, entry: LogEntry) -> None:
        data = self._decode(entry, EventKind.MATCH_START)
        try:
            match = Match.model_validate(data)
        except ValidationError as exc:
            raise DecodeFailureError(EventKind.MATCH_START.value, str(exc)) from exc

        previous = self._candidate
        if previous is not None:
            if previous.match_id is not None:
                logger.info(
                    "Match %s replaced by %s before it ended", previous.match_id, match.match_id
                )
            if match.course_deck is None:
                match = match.model_copy(update={"course_deck": previous.course_deck})

        self._candidate = match

    def _on_end(self, entry: LogEntry) -> Match | None:
        if self._candidate is None:
            raise MalformedFragmentError(EventKind.MATCH_END.value, "no match in progress")

        data = self._decode(entry, EventKind.MATCH_END)
        try:
            end = MatchEnd.model_validate(data)
        except ValidationError as exc:
            raise DecodeFailureError(EventKind.MATCH_END.value, str(exc)) from exc

        if end.params is None or end.params.payload_object is None:
            raise MalformedFragmentError(EventKind.MATCH_END.value, "missing params.payloadObject")

        match = self._candidate.with_result(end.params.payload_object)
        self.completed.append(match)
        self._candidate = None
        return match

    def _drop_candidate(self, reason: str) -> None:
        if self._candidate is not None and self._candidate.match_id is not None:
            logger.info(
                "Dropping unfinished match %s (%s)", self._candidate.match_id, reason
            )
        self._candidate = None


def accumulate(
    entries: Iterable[LogEntry],
    rules: Mapping[EventKind, PayloadRule] = DEFAULT_RULES,
) -> Iterator[Match]:
    """Yield completed matches from an entry sequence, in completion order."""
    accumulator = MatchAccumulator(rules)
    for entry in entries:
        match = accumulator.feed(entry)
        if match is not None:
            yield match


def parse_matches(
    raw: str,
    rules: Mapping[EventKind, PayloadRule] = DEFAULT_RULES,
) -> list[Match]:
    """Find every completed match in a log, in completion order."""
    boundary = rules[EventKind.MATCH_START].boundary
    return list(accumulate(segment(raw, boundary), rules))

