from __future__ import annotations

from ..graphics import Primitives
from ..sizer import SizeSource

# ============================================================================
# Diagram frame
#
# The rectangle around the whole diagram, and the title box in its top left
# corner. The title box is closed off by a right edge and a bottom edge; the
# frame's own edges provide the other two.
# ============================================================================


class FrameMaker:
    def __init__(
        self,
        sizer: SizeSource,
        font_height: float,
        primitives: Primitives,
    ) -> None:
        self.sizer = sizer
        self.font_height = font_height
        self.primitives = primitives
        pad_l = sizer.get("DiagPadL")
        self.left = pad_l
        self.right = sizer.get("DiagWidth") - pad_l
        self.top = 0.0
        self.bottom = 0.0

    def init_frame_and_make_title_box(self, tide_mark: float, title: list[str]) -> float:
        """Draw the title and its box at tide_mark; returns the new tide mark."""
        s = self.sizer
        self.top = tide_mark
        label_x = self.left + s.get("FrameTitleTextPadL")
        label_y = self.top + s.get("FrameTitleTextPadT")
        self.primitives.row_of_strings(
            label_x, label_y, self.font_height, "left", title
        )
        box_bottom = (
            label_y + len(title) * self.font_height + s.get("FrameTitleTextPadB")
        )
        box_right = self.left + s.get("FrameTitleBoxWidth")
        self.primitives.add_line(
            box_right, self.top, box_right, box_bottom, kind="frame"
        )
        self.primitives.add_line(
            self.left, box_bottom, box_right, box_bottom, kind="frame"
        )
        return box_bottom + s.get("FrameTitleRectPadB")

    def finalize_frame(self, tide_mark: float) -> float:
        """Draw the outer rectangle now its height is known."""
        self.bottom = tide_mark + self.sizer.get("FrameInternalPadB")
        self.primitives.add_rect(self.left, self.top, self.right, self.bottom)
        return self.bottom
