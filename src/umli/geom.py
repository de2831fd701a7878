from __future__ import annotations

from dataclasses import dataclass

# ============================================================================
# One dimensional geometry
#
# Segments are vertical extents (Y ranges) -- activity boxes, no-go zones,
# and the visible pieces of lifelines are all described by them.
# ============================================================================

# End value reported for a segment that has been started but not finished
OPEN_END = -1.0


@dataclass(slots=True)
class Segment:
    start: float
    end: float

    @property
    def length(self) -> float:
        return self.end - self.start

    @property
    def is_open(self) -> bool:
        return self.end == OPEN_END


def merge_segments(segments: list[Segment]) -> list[Segment]:
    """Sort segments by start and merge any that overlap or touch."""
    merged: list[Segment] = []
    for seg in sorted(segments, key=lambda s: s.start):
        if merged and seg.start <= merged[-1].end:
            merged[-1] = Segment(merged[-1].start, max(merged[-1].end, seg.end))
        else:
            merged.append(Segment(seg.start, seg.end))
    return merged


def complement_segments(
    extent: Segment,
    gaps: list[Segment],
    min_length: float = 0.0,
) -> list[Segment]:
    """The parts of extent not covered by gaps.

    Pieces shorter than min_length are dropped.
    """
    pieces: list[Segment] = []
    cursor = extent.start
    for gap in merge_segments(gaps):
        if gap.end <= extent.start or gap.start >= extent.end:
            continue
        if gap.start > cursor:
            pieces.append(Segment(cursor, gap.start))
        cursor = max(cursor, gap.end)
    if cursor < extent.end:
        pieces.append(Segment(cursor, extent.end))
    return [p for p in pieces if p.length >= min_length]
