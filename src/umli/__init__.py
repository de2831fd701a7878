"""umli: lay out UML sequence diagrams from a tiny text DSL, and render them to SVG."""

from __future__ import annotations

from dataclasses import replace

from .types import Model, RenderOptions, Statement
from .theme import DiagramColors, THEMES, DEFAULTS, resolve_theme
from .parser import parse
from .diag.creator import create_diagram
from .renderer import render_svg
from .errors import (
    UmliError,
    ParseError,
    UnknownLifelineError,
    UnknownSizeError,
    ActivityBoxError,
)

__all__ = [
    "render_umli",
    "parse",
    "create_diagram",
    "render_svg",
    "THEMES",
    "DEFAULTS",
    "RenderOptions",
    "Model",
    "Statement",
    "DiagramColors",
    "UmliError",
    "ParseError",
    "UnknownLifelineError",
    "UnknownSizeError",
    "ActivityBoxError",
]


def _build_colors(options: RenderOptions) -> DiagramColors:
    """Build DiagramColors from render options, on top of the named theme."""
    base = resolve_theme(options.theme)
    overrides = {
        name: value
        for name in ("bg", "fg", "line", "accent", "muted", "surface", "border")
        if (value := getattr(options, name)) is not None
    }
    return replace(base, **overrides)


def render_umli(
    text: str,
    options: RenderOptions | None = None,
) -> str:
    """Render umli DSL text to an SVG string."""
    if options is None:
        options = RenderOptions()

    diagram = create_diagram(parse(text))
    return render_svg(
        diagram,
        _build_colors(options),
        font=options.font or "Inter",
        transparent=options.transparent or False,
        output_width=options.output_width,
    )
