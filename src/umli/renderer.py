from __future__ import annotations

from .graphics import FilledPoly, HJust, Label, Line, LineKind, Model, Rect, VJust
from .theme import DiagramColors, build_style_block, fmt_num, svg_open_tag

# ============================================================================
# SVG renderer
#
# Renders a graphics model to an SVG string. The model's abstract
# coordinates become the SVG viewBox, so nothing needs rescaling here.
# All colors use CSS custom properties (var(--_xxx)) from the theme system.
#
# Render order (back to front):
#   1. Rectangles, largest first so the frame sits behind the boxes
#   2. Lines (lifelines, interaction lines, self loops)
#   3. Arrow heads
#   4. Labels
# ============================================================================

STROKE_WIDTH_K = 0.1  # proportion of the font height

_TEXT_ANCHOR: dict[HJust, str] = {
    "left": "start",
    "centre": "middle",
    "right": "end",
}

_BASELINE: dict[VJust, str] = {
    "top": "text-before-edge",
    "centre": "central",
    "bottom": "text-after-edge",
}

_LINE_COLOR: dict[LineKind, str] = {
    "interaction": "var(--_arrow)",
    "lifeline": "var(--_lifeline)",
    "frame": "var(--_box-stroke)",
}


def render_svg(
    diagram: Model,
    colors: DiagramColors,
    font: str = "Inter",
    transparent: bool = False,
    output_width: float | None = None,
) -> str:
    """Render a graphics model as an SVG string.

    Args:
        colors: DiagramColors with bg/fg and optional enrichment variables.
        transparent: If true, renders with transparent background.
        output_width: Rendered width in px; defaults to the model width.
    """
    stroke = STROKE_WIDTH_K * diagram.font_height
    prims = diagram.primitives
    parts: list[str] = [
        svg_open_tag(diagram.width, diagram.height, colors, transparent, output_width),
        build_style_block(font),
    ]

    for rect in sorted(prims.rects, key=_area, reverse=True):
        parts.append(_render_rect(rect, stroke))
    for line in prims.lines:
        parts.append(_render_line(line, stroke, diagram.dash_length, diagram.dash_gap))
    for poly in prims.filled_polys:
        parts.append(_render_poly(poly))
    for label in prims.labels:
        parts.append(_render_label(label))

    parts.append("</svg>")
    return "\n".join(parts)


# ============================================================================
# Primitive renderers
# ============================================================================


def _area(rect: Rect) -> float:
    return (rect.right - rect.left) * (rect.bottom - rect.top)


def _render_rect(rect: Rect, stroke: float) -> str:
    return (
        f'<rect x="{fmt_num(rect.left)}" y="{fmt_num(rect.top)}" '
        f'width="{fmt_num(rect.right - rect.left)}" '
        f'height="{fmt_num(rect.bottom - rect.top)}" '
        f'fill="var(--_box-fill)" stroke="var(--_box-stroke)" '
        f'stroke-width="{fmt_num(stroke)}" />'
    )


def _render_line(line: Line, stroke: float, dash_length: float, dash_gap: float) -> str:
    style = f'stroke="{_LINE_COLOR[line.kind]}"'
    if line.dashed:
        style += f' stroke-dasharray="{fmt_num(dash_length)} {fmt_num(dash_gap)}"'
    return (
        f'<line x1="{fmt_num(line.p1.x)}" y1="{fmt_num(line.p1.y)}" '
        f'x2="{fmt_num(line.p2.x)}" y2="{fmt_num(line.p2.y)}" '
        f'{style} stroke-width="{fmt_num(stroke)}" />'
    )


def _render_poly(poly: FilledPoly) -> str:
    points = " ".join(f"{fmt_num(v.x)},{fmt_num(v.y)}" for v in poly.vertices)
    return f'<polygon points="{points}" fill="var(--_arrow)" />'


def _render_label(label: Label) -> str:
    return (
        f'<text x="{fmt_num(label.anchor.x)}" y="{fmt_num(label.anchor.y)}" '
        f'text-anchor="{_TEXT_ANCHOR[label.h_just]}" '
        f'dominant-baseline="{_BASELINE[label.v_just]}" '
        f'font-size="{fmt_num(label.font_height)}">{_escape_xml(label.text)}</text>'
    )


# ============================================================================
# Utilities
# ============================================================================


def _escape_xml(text: str) -> str:
    """Escape special XML characters in text content."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )
