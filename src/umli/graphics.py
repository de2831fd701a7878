from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Literal

# ============================================================================
# Graphics model
#
# The output of diagram creation: a flat, append-only list of primitives in
# an abstract coordinate system (Y grows downwards). Renderers are expected
# to scale it to whatever units suit them.
# ============================================================================

HJust = Literal["left", "centre", "right"]
VJust = Literal["top", "centre", "bottom"]

# What a line is part of; renderers colour lines by kind
LineKind = Literal["interaction", "lifeline", "frame"]

# Tolerance used when comparing coordinates
TOLERANCE = 0.001


def val_equal_ish(a: float, b: float) -> bool:
    """Float equality within TOLERANCE."""
    return math.isclose(a, b, abs_tol=TOLERANCE)


@dataclass(slots=True)
class Point:
    x: float
    y: float

    def equal_ish(self, other: Point) -> bool:
        return val_equal_ish(self.x, other.x) and val_equal_ish(self.y, other.y)


@dataclass(slots=True)
class Line:
    p1: Point
    p2: Point
    dashed: bool = False
    kind: LineKind = "interaction"

    def equal_ish(self, other: Line) -> bool:
        return (
            self.dashed == other.dashed
            and self.p1.equal_ish(other.p1)
            and self.p2.equal_ish(other.p2)
        )


@dataclass(slots=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float


@dataclass(slots=True)
class FilledPoly:
    vertices: list[Point] = field(default_factory=list)

    def includes_vertex(self, vertex: Point) -> bool:
        return any(v.equal_ish(vertex) for v in self.vertices)


@dataclass(slots=True)
class Label:
    text: str
    font_height: float
    anchor: Point
    h_just: HJust
    v_just: VJust

    def equal_ish(self, other: Label) -> bool:
        return (
            self.text == other.text
            and self.h_just == other.h_just
            and self.v_just == other.v_just
            and val_equal_ish(self.font_height, other.font_height)
            and self.anchor.equal_ish(other.anchor)
        )


@dataclass(slots=True)
class Primitives:
    lines: list[Line] = field(default_factory=list)
    rects: list[Rect] = field(default_factory=list)
    filled_polys: list[FilledPoly] = field(default_factory=list)
    labels: list[Label] = field(default_factory=list)

    def add_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        dashed: bool = False,
        kind: LineKind = "interaction",
    ) -> None:
        self.lines.append(Line(Point(x1, y1), Point(x2, y2), dashed, kind))

    def add_rect(self, left: float, top: float, right: float, bottom: float) -> None:
        self.rects.append(Rect(left, top, right, bottom))

    def add_filled_poly(self, vertices: list[Point]) -> None:
        self.filled_polys.append(FilledPoly(list(vertices)))

    def add_label(
        self,
        text: str,
        font_height: float,
        x: float,
        y: float,
        h_just: HJust,
        v_just: VJust,
    ) -> None:
        self.labels.append(Label(text, font_height, Point(x, y), h_just, v_just))

    def row_of_strings(
        self,
        x: float,
        first_row_y: float,
        font_height: float,
        h_just: HJust,
        strings: list[str],
    ) -> None:
        """Stack strings one per row, top justified, starting at first_row_y."""
        for i, s in enumerate(strings):
            y = first_row_y + i * font_height
            self.add_label(s, font_height, x, y, h_just, "top")

    def contains_line(self, line: Line) -> bool:
        return any(l.equal_ish(line) for l in self.lines)

    def contains_label(self, label: Label) -> bool:
        return any(l.equal_ish(label) for l in self.labels)


@dataclass(slots=True)
class Model:
    """A complete diagram ready for rendering."""
    width: float
    height: float
    font_height: float
    dash_length: float
    dash_gap: float
    primitives: Primitives = field(default_factory=Primitives)
