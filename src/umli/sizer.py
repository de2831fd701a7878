from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from .errors import UnknownSizeError

# ============================================================================
# Sizer
#
# Single source of truth for how big things are, and how far apart they
# should be: title boxes, arrows, dashed line mark/space, padding etc.
#
# Nearly everything is sized in proportion to the font height. Naming
# convention for padding: <Xxx>Pad<T|B|L> reads as "the padding thing Xxx
# requires at its Top/Bottom/Left".
# ============================================================================

# Coefficients multiplied by the font height
FONT_HEIGHT_K = {
    "DiagramPadT": 0.5,
    "DiagramPadB": 0.5,
    "DiagPadL": 0.5,
    "FrameTitleTextPadT": 0.5,
    "FrameTitleTextPadB": 0.5,
    "FrameTitleTextPadL": 0.5,
    # Space between the frame's title box and the lifeline title boxes
    "FrameTitleRectPadB": 1.5,
    # Space inside the bottom edge of the frame
    "FrameInternalPadB": 1.0,
    "TitleBoxLabelPadT": 0.5,
    "TitleBoxLabelPadB": 0.5,
    "TitleBoxPadB": 1.0,
    "ActivityBoxWidth": 1.5,
    # How far a box starts above the interaction line leaving it
    "ActivityBoxVerticalOverlap": 0.5,
    "ArrowLen": 1.5,
    "InteractionLineTextPadB": 0.5,
    "DashLineDashLen": 0.5,
    "DashLineDashGap": 0.25,
    "SelfLoopHeight": 3.0,
    "IndividualStoppedBoxPadB": 0.5,
    "FinalizedActivityBoxesPadB": 0.5,
    # Lifeline segments shorter than this are not drawn
    "MinLifelineSegLength": 0.5,
}

# Coefficients multiplied by the diagram width
DIAGRAM_WIDTH_K = {
    "FrameTitleBoxWidth": 0.25,
    "IdealLifelineTitleBoxWidth": 0.15,
}

ARROW_ASPECT_RATIO = 0.4

# Self loop width as a proportion of the lifeline pitch
SELF_LOOP_WIDTH_FACTOR = 0.3


class Sizer:
    """Sizes derived from the diagram width and font height."""

    def __init__(self, diagram_width: float, font_height: float) -> None:
        fh = font_height
        sizes: dict[str, float] = {
            "DiagWidth": diagram_width,
            "FontHt": fh,
        }
        for name, k in FONT_HEIGHT_K.items():
            sizes[name] = k * fh
        for name, k in DIAGRAM_WIDTH_K.items():
            sizes[name] = k * diagram_width

        sizes["ArrowWidth"] = ARROW_ASPECT_RATIO * sizes["ArrowLen"]
        # Measured from the line itself, so it has to clear the arrow head
        sizes["InteractionLinePadB"] = 0.5 * sizes["ArrowWidth"] + 0.5 * fh
        sizes["InteractionLineLabelIndent"] = 0.5 * sizes["ActivityBoxWidth"] + 0.5 * fh
        sizes["SelfLoopWidthFactor"] = SELF_LOOP_WIDTH_FACTOR
        self._sizes = sizes

    def get(self, name: str) -> float:
        """Size called name; raises UnknownSizeError if there is no such size."""
        try:
            return self._sizes[name]
        except KeyError:
            raise UnknownSizeError(name) from None

    def names(self) -> list[str]:
        return sorted(self._sizes)


class LiteralSizer:
    """A sizer that serves exactly the values it is given."""

    def __init__(self, sizes: Mapping[str, float]) -> None:
        self._sizes = dict(sizes)

    def get(self, name: str) -> float:
        try:
            return self._sizes[name]
        except KeyError:
            raise UnknownSizeError(name) from None

    def names(self) -> list[str]:
        return sorted(self._sizes)


class SizeSource(Protocol):
    """Anything that can look up a size by name."""

    def get(self, name: str) -> float: ...
