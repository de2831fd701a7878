from __future__ import annotations

from ..errors import ActivityBoxError
from ..geom import OPEN_END, Segment

# ============================================================================
# Activity box tracking
#
# One BoxTracker per lifeline. A box is started when an interaction first
# touches an idle lifeline, and terminated by an explicit "stop" or when
# the diagram is finalized. Only the most recent box can be in progress.
# ============================================================================


class BoxTracker:
    def __init__(self) -> None:
        self._boxes: list[Segment] = []

    def start_at(self, y: float) -> None:
        """Start a box at y, unless one is already in progress.

        Consecutive interactions on a lifeline share a single box.
        """
        if self.in_progress():
            return
        self._boxes.append(Segment(y, OPEN_END))

    def terminate_at(self, y: float) -> None:
        if not self.in_progress():
            raise ActivityBoxError(
                "cannot terminate an activity box: none is in progress"
            )
        self._boxes[-1].end = y

    def in_progress(self) -> bool:
        return bool(self._boxes) and self._boxes[-1].is_open

    def most_recent(self) -> Segment:
        if not self._boxes:
            raise ActivityBoxError("no activity box has been started")
        return self._boxes[-1]

    def as_segments(self) -> list[Segment]:
        """All boxes in the order started; an open box ends at OPEN_END."""
        return [Segment(b.start, b.end) for b in self._boxes]

    def closed_segments(self) -> list[Segment]:
        return [Segment(b.start, b.end) for b in self._boxes if not b.is_open]
