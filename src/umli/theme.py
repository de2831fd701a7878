from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

# ============================================================================
# Types
# ============================================================================


@dataclass(slots=True)
class DiagramColors:
    """Diagram color configuration.

    Required: bg + fg give you a clean mono diagram.
    Optional: line, accent, muted, surface, border bring in richer color.
    """

    bg: str
    fg: str
    line: str | None = None
    accent: str | None = None
    muted: str | None = None
    surface: str | None = None
    border: str | None = None


# ============================================================================
# Defaults
# ============================================================================

DEFAULTS = {"bg": "#FFFFFF", "fg": "#27272A"}

# color-mix() weights for the derived CSS variables
MIX = {
    "label": 85,
    "lifeline": 35,
    "arrow": 70,
    "box_fill": 4,
    "box_stroke": 55,
}

# ============================================================================
# Well-known theme palettes
# ============================================================================

THEMES: dict[str, DiagramColors] = {
    "zinc-light": DiagramColors(bg="#FFFFFF", fg="#27272A"),
    "zinc-dark": DiagramColors(bg="#18181B", fg="#FAFAFA"),
    "nord": DiagramColors(
        bg="#2e3440", fg="#d8dee9",
        line="#4c566a", accent="#88c0d0", muted="#616e88",
    ),
    "github-light": DiagramColors(
        bg="#ffffff", fg="#1f2328",
        line="#d1d9e0", accent="#0969da", muted="#59636e",
    ),
    "github-dark": DiagramColors(
        bg="#0d1117", fg="#e6edf3",
        line="#3d444d", accent="#4493f8", muted="#9198a1",
    ),
    "solarized-light": DiagramColors(
        bg="#fdf6e3", fg="#657b83",
        line="#93a1a1", accent="#268bd2", muted="#93a1a1",
    ),
}


def resolve_theme(name: str | None) -> DiagramColors:
    """Colors for a named theme; None gives the defaults."""
    if name is None:
        return DiagramColors(bg=DEFAULTS["bg"], fg=DEFAULTS["fg"])
    try:
        return THEMES[name]
    except KeyError:
        known = ", ".join(sorted(THEMES))
        raise ValueError(f"Unknown theme '{name}', expected one of: {known}") from None


# ============================================================================
# SVG style block
# ============================================================================


def build_style_block(font: str) -> str:
    """Build the CSS variable derivation rules for the SVG <style> block."""
    font_import = (
        f"@import url('https://fonts.googleapis.com/css2?family={quote(font)}"
        f":wght@400;500&amp;display=swap');"
    )

    derived_vars = f"""
    /* Derived from --bg and --fg (overridable via --line, --accent, etc.) */
    --_text:        var(--muted, color-mix(in srgb, var(--fg) {MIX["label"]}%, var(--bg)));
    --_lifeline:    var(--line, color-mix(in srgb, var(--fg) {MIX["lifeline"]}%, var(--bg)));
    --_arrow:       var(--accent, color-mix(in srgb, var(--fg) {MIX["arrow"]}%, var(--bg)));
    --_box-fill:    var(--surface, color-mix(in srgb, var(--fg) {MIX["box_fill"]}%, var(--bg)));
    --_box-stroke:  var(--border, color-mix(in srgb, var(--fg) {MIX["box_stroke"]}%, var(--bg)));"""

    return "\n".join([
        "<style>",
        f"  {font_import}",
        f"  text {{ font-family: '{font}', system-ui, sans-serif; fill: var(--_text); }}",
        f"  svg {{{derived_vars}",
        "  }",
        "</style>",
    ])


def svg_open_tag(
    width: float,
    height: float,
    colors: DiagramColors,
    transparent: bool = False,
    output_width: float | None = None,
) -> str:
    """Build the SVG opening tag with CSS variables set as inline styles.

    The viewBox is always the diagram's own coordinate system; output_width
    scales the rendered size, keeping the aspect ratio.
    """
    vars_parts = [
        f"--bg:{colors.bg}",
        f"--fg:{colors.fg}",
    ]
    for name in ("line", "accent", "muted", "surface", "border"):
        value = getattr(colors, name)
        if value:
            vars_parts.append(f"--{name}:{value}")

    vars_str = ";".join(vars_parts)
    bg_style = "" if transparent else ";background:var(--bg)"

    out_w = output_width or width
    out_h = height * out_w / width if width else height
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {fmt_num(width)} {fmt_num(height)}" '
        f'width="{fmt_num(out_w)}" height="{fmt_num(out_h)}" style="{vars_str}{bg_style}">'
    )


def fmt_num(value: float) -> str:
    """Compact number formatting for SVG attributes."""
    return f"{value:.2f}".rstrip("0").rstrip(".")
