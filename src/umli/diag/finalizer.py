from __future__ import annotations

from ..geom import Segment, complement_segments
from ..graphics import Primitives
from ..types import Statement
from .boxes import BoxTracker
from .nogozone import NoGoZones
from .spacing import Spacing

# ============================================================================
# Lifeline finalizer
#
# Draws the dashed vertical line for every lifeline, once everything else
# is known. Each line is broken into pieces so that it does not cross the
# activity boxes on it, nor the no-go zones that apply to it.
# ============================================================================


class Finalizer:
    def __init__(
        self,
        lifelines: list[Statement],
        spacing: Spacing,
        no_go_zones: NoGoZones,
        boxes: list[BoxTracker],
    ) -> None:
        self.lifelines = lifelines
        self.spacing = spacing
        self.no_go_zones = no_go_zones
        self.boxes = boxes

    def gaps_for(self, lifeline: str) -> list[Segment]:
        """Where the lifeline must not be drawn, unsorted and unmerged."""
        gaps = self.no_go_zones.gaps_for(lifeline)
        gaps.extend(self.boxes[self.spacing.index_of(lifeline)].closed_segments())
        return gaps

    def finalize(
        self,
        top: float,
        bottom: float,
        min_seg_len: float,
        primitives: Primitives,
    ) -> None:
        for ll in self.lifelines:
            name = ll.lifeline_name
            x = self.spacing.centre_line(name)
            visible = complement_segments(
                Segment(top, bottom), self.gaps_for(name), min_seg_len
            )
            for seg in visible:
                primitives.add_line(
                    x, seg.start, x, seg.end, dashed=True, kind="lifeline"
                )
