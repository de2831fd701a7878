from __future__ import annotations

import logging

from ..graphics import Model as GraphicsModel
from ..sizer import Sizer
from ..types import Model
from .boxes import BoxTracker
from .finalizer import Finalizer
from .frame import FrameMaker
from .interactions import Maker, MakerDependencies
from .spacing import Spacing

logger = logging.getLogger(__name__)

# ============================================================================
# Diagram creation
#
# Turns a parsed umli model into a graphics model in a single pass down the
# page. A "tide mark" Y coordinate moves down as things are drawn, and
# everything drawn next is positioned relative to it.
#
# Creation steps:
#   1. Choose the font height, add lifeline letters to their titles
#   2. Frame title box, then the lifeline title boxes
#   3. Interaction lines, labels and self loops, statement by statement
#   4. Close and draw any activity boxes still in progress
#   5. Dashed lifelines, with gaps around boxes and no-go zones
#   6. Outer frame and final diagram height
# ============================================================================

# Arbitrary working width; renderers scale it to suit
DIAGRAM_WIDTH = 2000.0

# "textsize N" sets the font height to N/1000 of the diagram width
DEFAULT_TEXT_SIZE = 10.0


class Creator:
    def __init__(self, model: Model, width: float = DIAGRAM_WIDTH) -> None:
        self.width = width
        text_size = model.size_from_text_statement() or DEFAULT_TEXT_SIZE
        self.font_height = width * text_size / 1000.0

        if not model.lifeline_letters_suppressed():
            model = model.with_lifeline_letters()
        self.model = model
        self.lifelines = model.lifeline_statements()

        self.sizer = Sizer(width, self.font_height)
        self.spacing = Spacing(self.sizer, self.font_height, width, self.lifelines)
        self.boxes = [BoxTracker() for _ in self.lifelines]
        self.graphics_model = GraphicsModel(
            width=width,
            height=0.0,  # known only at the end
            font_height=self.font_height,
            dash_length=self.sizer.get("DashLineDashLen"),
            dash_gap=self.sizer.get("DashLineDashGap"),
        )
        self.frame_maker = FrameMaker(
            self.sizer, self.font_height, self.graphics_model.primitives
        )
        self.maker = Maker(
            MakerDependencies(self.font_height, self.spacing, self.sizer, self.boxes),
            self.graphics_model,
        )
        self.tide_mark = 0.0
        self.lifeline_top = 0.0

    def create(self) -> GraphicsModel:
        """Build and return the graphics model for the diagram."""
        logger.debug(
            "Creating diagram: %d statements, %d lifelines, font height %.2f",
            len(self.model.statements), len(self.lifelines), self.font_height,
        )
        self.tide_mark = self.sizer.get("DiagramPadT")
        self.tide_mark = self.frame_maker.init_frame_and_make_title_box(
            self.tide_mark, self.model.title()
        )
        self.lifeline_title_boxes()
        self.tide_mark, no_go_zones = self.maker.scan(
            self.tide_mark, self.model.statements
        )
        self.finalize_activity_boxes()
        Finalizer(self.lifelines, self.spacing, no_go_zones, self.boxes).finalize(
            self.lifeline_top,
            self.tide_mark,
            self.sizer.get("MinLifelineSegLength"),
            self.graphics_model.primitives,
        )
        self.tide_mark = self.frame_maker.finalize_frame(self.tide_mark)
        self.graphics_model.height = self.tide_mark + self.sizer.get("DiagramPadB")
        logger.debug("Diagram height %.2f", self.graphics_model.height)
        return self.graphics_model

    def title_box_height(self) -> float:
        rows = max((len(ll.label_segments) for ll in self.lifelines), default=0)
        return (
            self.sizer.get("TitleBoxLabelPadT")
            + rows * self.font_height
            + self.sizer.get("TitleBoxLabelPadB")
        )

    def lifeline_title_boxes(self) -> None:
        """Title boxes across the top of the lifelines, labels bottom justified."""
        top = self.tide_mark
        bot = top + self.title_box_height()
        prims = self.graphics_model.primitives
        half_width = 0.5 * self.spacing.title_box_width
        for ll in self.lifelines:
            centre = self.spacing.centre_line(ll.lifeline_name)
            prims.add_rect(centre - half_width, top, centre + half_width, bot)
            n = len(ll.label_segments)
            first_row_y = bot - n * self.font_height - self.sizer.get("TitleBoxLabelPadB")
            prims.row_of_strings(
                centre, first_row_y, self.font_height, "centre", ll.label_segments
            )
        self.lifeline_top = bot
        self.tide_mark = bot + self.sizer.get("TitleBoxPadB")

    def finalize_activity_boxes(self) -> None:
        """Close the boxes that no "stop" statement closed."""
        bottom = self.tide_mark + self.sizer.get("ActivityBoxVerticalOverlap")
        for ll, tracker in zip(self.lifelines, self.boxes):
            if tracker.in_progress():
                self.maker.terminate_box(ll.lifeline_name, bottom)
        self.tide_mark = bottom + self.sizer.get("FinalizedActivityBoxesPadB")


def create_diagram(model: Model) -> GraphicsModel:
    """Lay out a parsed umli model as a graphics model."""
    return Creator(model).create()
