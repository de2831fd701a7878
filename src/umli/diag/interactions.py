from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from ..graphics import Model as GraphicsModel
from ..graphics import Point, Primitives
from ..sizer import SizeSource
from ..types import Keyword, Statement
from .boxes import BoxTracker
from .nogozone import NoGoZones
from .spacing import Spacing

logger = logging.getLogger(__name__)

# ============================================================================
# Interactions
#
# Works down the page through the DSL statements, producing the interaction
# lines, their labels and arrows, and deciding when activity boxes start and
# stop. Each statement is expanded into an ordered list of stages; each
# stage receives the current tide mark and returns the advanced one.
# ============================================================================

# Ordered stages for each keyword. Keywords missing here are dealt with
# before the scan (life, title, textsize, showletters).
STAGES: dict[Keyword, tuple[str, ...]] = {
    "full": ("interaction_label", "start_from_box", "start_to_box", "interaction_line"),
    # A return does not start a box at its source.
    "dash": ("interaction_label", "start_to_box", "interaction_line"),
    "self": ("self_label", "start_from_box", "self_interaction_lines"),
    "stop": ("end_box",),
}


def stages_for(keyword: Keyword) -> tuple[str, ...]:
    return STAGES.get(keyword, ())


def make_arrow(
    x1: float, x2: float, y: float, arrow_len: float, arrow_width: float
) -> list[Point]:
    """Arrow head for a horizontal line from x1 to x2, with its tip at x2."""
    direction = 1.0 if x2 >= x1 else -1.0
    tail_x = x2 - direction * arrow_len
    return [
        Point(x2, y),
        Point(tail_x, y - 0.5 * arrow_width),
        Point(tail_x, y + 0.5 * arrow_width),
    ]


@dataclass(slots=True)
class MakerDependencies:
    """Everything the Maker needs from the rest of the creation process."""
    font_height: float
    spacing: Spacing
    sizer: SizeSource
    # Indexed by lifeline declaration order
    boxes: list[BoxTracker]


StageFn = Callable[[float, Statement], float]


class Maker:
    def __init__(self, deps: MakerDependencies, graphics_model: GraphicsModel) -> None:
        self.deps = deps
        self.graphics_model = graphics_model
        self.no_go_zones = NoGoZones(deps.spacing)

    @property
    def _prims(self) -> Primitives:
        return self.graphics_model.primitives

    def _size(self, name: str) -> float:
        return self.deps.sizer.get(name)

    def _boxes_for(self, lifeline: str) -> BoxTracker:
        return self.deps.boxes[self.deps.spacing.index_of(lifeline)]

    def scan(
        self, tide_mark: float, statements: list[Statement]
    ) -> tuple[float, NoGoZones]:
        """Generate graphics for the statements in order.

        Returns the tide mark after the last of them, and the no-go zones
        claimed along the way.
        """
        for statement in statements:
            for stage in stages_for(statement.keyword):
                fn: StageFn = getattr(self, stage)
                tide_mark = fn(tide_mark, statement)
        logger.debug(
            "Scanned %d statements, %d no-go zones, tide mark %.2f",
            len(statements), len(self.no_go_zones), tide_mark,
        )
        return tide_mark, self.no_go_zones

    # ------------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------------

    def interaction_label(self, tide_mark: float, s: Statement) -> float:
        source, dest = s.referenced_lifelines
        x = self.deps.spacing.interaction_label_x(source, dest)
        first_row_y = tide_mark
        self._prims.row_of_strings(
            x, first_row_y, self.deps.font_height, "centre", s.label_segments
        )
        tide_mark = self._below_label(first_row_y, s)
        self._claim_space(source, dest, first_row_y, tide_mark)
        return tide_mark

    def start_from_box(self, tide_mark: float, s: Statement) -> float:
        # Starts a little above the tide mark, which is left where it is so
        # the line that follows stays in contact with its label.
        overlap = self._size("ActivityBoxVerticalOverlap")
        self._boxes_for(s.referenced_lifelines[0]).start_at(tide_mark - overlap)
        return tide_mark

    def start_to_box(self, tide_mark: float, s: Statement) -> float:
        self._boxes_for(s.referenced_lifelines[1]).start_at(tide_mark)
        return tide_mark

    def interaction_line(self, tide_mark: float, s: Statement) -> float:
        source, dest = s.referenced_lifelines
        x1, x2 = self.deps.spacing.interaction_line_end_points(source, dest)
        y = tide_mark
        self._prims.add_line(x1, y, x2, y, dashed=s.keyword == "dash")
        self._prims.add_filled_poly(
            make_arrow(x1, x2, y, self._size("ArrowLen"), self._size("ArrowWidth"))
        )
        tide_mark = y + self._size("InteractionLinePadB")
        self._claim_space(source, dest, y, tide_mark)
        return tide_mark

    def self_label(self, tide_mark: float, s: Statement) -> float:
        lifeline = s.referenced_lifelines[0]
        x = (
            self.deps.spacing.centre_line(lifeline)
            + self._size("InteractionLineLabelIndent")
        )
        self._prims.row_of_strings(
            x, tide_mark, self.deps.font_height, "left", s.label_segments
        )
        return self._below_label(tide_mark, s)

    def self_interaction_lines(self, tide_mark: float, s: Statement) -> float:
        left, right = self.deps.spacing.self_interaction_x_coords(
            s.referenced_lifelines[0]
        )
        top = tide_mark
        bot = top + self._size("SelfLoopHeight")
        self._prims.add_line(left, top, right, top)
        self._prims.add_line(right, top, right, bot)
        self._prims.add_line(right, bot, left, bot)
        self._prims.add_filled_poly(
            make_arrow(right, left, bot, self._size("ArrowLen"), self._size("ArrowWidth"))
        )
        return bot + self._size("InteractionLinePadB")

    def end_box(self, tide_mark: float, s: Statement) -> float:
        self.terminate_box(s.referenced_lifelines[0], tide_mark)
        return tide_mark + self._size("IndividualStoppedBoxPadB")

    # ------------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------------

    def terminate_box(self, lifeline: str, bottom: float) -> None:
        """End the box in progress on lifeline at bottom, and draw it."""
        tracker = self._boxes_for(lifeline)
        top = tracker.most_recent().start
        tracker.terminate_at(bottom)
        coords = self.deps.spacing.activity_box_x_coords(lifeline)
        self._prims.add_rect(coords.left, top, coords.right, bottom)

    def _below_label(self, first_row_y: float, s: Statement) -> float:
        rows = len(s.label_segments)
        return (
            first_row_y
            + rows * self.deps.font_height
            + self._size("InteractionLineTextPadB")
        )

    def _claim_space(
        self, lifeline_a: str, lifeline_b: str, y_start: float, y_end: float
    ) -> None:
        if y_end > y_start:
            self.no_go_zones.register_space_claim(lifeline_a, lifeline_b, y_start, y_end)
