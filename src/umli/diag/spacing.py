from __future__ import annotations

from dataclasses import dataclass

from ..errors import UnknownLifelineError
from ..sizer import SizeSource
from ..types import Statement

# ============================================================================
# Lifeline spacing
#
# Horizontal geometry of the lifelines. All title boxes get the same width
# and are distributed evenly across the diagram, with the same gap (gutter)
# between neighbouring boxes as at the left and right diagram edges.
# ============================================================================


@dataclass(slots=True)
class DrivingValues:
    title_box_width: float
    title_box_gutter: float


@dataclass(slots=True)
class ActivityBoxXCoords:
    left: float
    centre: float
    right: float


class Spacing:
    def __init__(
        self,
        sizer: SizeSource,
        font_height: float,
        diagram_width: float,
        lifelines: list[Statement],
    ) -> None:
        self.sizer = sizer
        self.font_height = font_height
        self.diagram_width = diagram_width
        self.lifelines = lifelines
        # Lifeline letter -> declaration order
        self._index = {ll.lifeline_name: i for i, ll in enumerate(lifelines)}
        self.driving_values = self._calc_driving_values()

    def _calc_driving_values(self) -> DrivingValues:
        n = len(self.lifelines)
        box_width = self.sizer.get("IdealLifelineTitleBoxWidth")
        if n == 0:
            return DrivingValues(box_width, self.diagram_width)
        gutter = (self.diagram_width - n * box_width) / (n + 1)

        # When the ideal boxes leave too little room (or none), keep a
        # gutter of one font height and make the boxes narrower instead.
        if gutter < self.font_height:
            gutter = self.font_height
            box_width = (self.diagram_width - (n + 1) * gutter) / n
        return DrivingValues(box_width, gutter)

    @property
    def title_box_width(self) -> float:
        return self.driving_values.title_box_width

    @property
    def title_box_gutter(self) -> float:
        return self.driving_values.title_box_gutter

    def index_of(self, lifeline: str) -> int:
        """Declaration order of a lifeline, given its letter."""
        try:
            return self._index[lifeline]
        except KeyError:
            raise UnknownLifelineError(lifeline) from None

    def centre_line(self, lifeline: str) -> float:
        i = self.index_of(lifeline)
        dv = self.driving_values
        return dv.title_box_gutter * (i + 1) + dv.title_box_width * (i + 0.5)

    def lifeline_pitch(self) -> float:
        """Horizontal distance between neighbouring centre lines."""
        return self.title_box_gutter + self.title_box_width

    def activity_box_x_coords(self, lifeline: str) -> ActivityBoxXCoords:
        centre = self.centre_line(lifeline)
        half = 0.5 * self.sizer.get("ActivityBoxWidth")
        return ActivityBoxXCoords(centre - half, centre, centre + half)

    def interaction_line_end_points(
        self, source: str, dest: str
    ) -> tuple[float, float]:
        """X coords for a line from source to dest, between facing box edges."""
        src = self.activity_box_x_coords(source)
        dst = self.activity_box_x_coords(dest)
        if self.index_of(dest) > self.index_of(source):
            return src.right, dst.left
        return src.left, dst.right

    def interaction_label_x(self, source: str, dest: str) -> float:
        """Labels sit centred, half way between the two lifelines.

        Leftward calls are centred the same way as rightward ones.
        """
        return 0.5 * (self.centre_line(source) + self.centre_line(dest))

    def self_interaction_x_coords(self, lifeline: str) -> tuple[float, float]:
        """Left and right X of a self interaction loop."""
        left = self.activity_box_x_coords(lifeline).right
        right = left + self.sizer.get("SelfLoopWidthFactor") * self.lifeline_pitch()
        return left, right
