"""
Log segmentation.

The client log is an append-only stream of free-text marker lines with JSON
blobs embedded between them. Segmentation splits it into entries on a
boundary pattern. Two boundaries exist:

    COARSE_BOUNDARY: [UnityCrossThreadLogger]
    FINE_BOUNDARY:   [UnityCrossThreadLogger] or [Client GRE]

Some events (auth, match fragments) are only separated from their neighbours
by the fine boundary.

Example entry (text after the boundary):

    1/21/2019 8:14:22 PM
    <== PlayerInventory.GetPlayerCardsV3(12)
    {"66091": 4, "66093": 1}
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

COARSE_BOUNDARY = re.compile(re.escape("[UnityCrossThreadLogger]"))
FINE_BOUNDARY = re.compile(r"\[UnityCrossThreadLogger\]|\[Client GRE\]")


@dataclass(frozen=True, slots=True)
class LogEntry:
    """
    One block of log text between two boundary markers.

    Attributes:
        index: Position of the entry in the stream (0-based)
        text: Entry text, boundary marker excluded
        start: Character offset of the entry in the raw log
    """

    index: int
    text: str
    start: int = 0

    def tail(self, offset: int) -> str | None:
        """Everything from line `offset` to the end of the entry, or None if too short."""
        lines = self.text.split("\n", offset)
        if len(lines) <= offset:
            return None
        return lines[offset]


def segment(raw: str, boundary: re.Pattern[str] | str = COARSE_BOUNDARY) -> Iterator[LogEntry]:
    """
    Split raw log text into entries on every boundary match.

    Entries are yielded lazily in log order. Boundary text is dropped, and
    empty segments (e.g. before a leading marker) are skipped, so empty input
    yields nothing.

    Args:
        raw: Complete log text
        boundary: Compiled pattern or regex string marking entry starts
    """
    if isinstance(boundary, str):
        boundary = re.compile(boundary)

    index = 0
    start = 0
    for marker in boundary.finditer(raw):
        if marker.start() > start:
            yield LogEntry(index=index, text=raw[start : marker.start()], start=start)
            index += 1
        start = marker.end()

    if start < len(raw):
        yield LogEntry(index=index, text=raw[start:], start=start)
