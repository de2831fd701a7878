from __future__ import annotations

import re

import pytest

from umli import RenderOptions, render_umli
from umli.errors import ParseError, UmliError
from umli.graphics import Model, Primitives
from umli.renderer import render_svg
from umli.theme import THEMES, DiagramColors, fmt_num, resolve_theme

COLORS = DiagramColors(bg="#FFFFFF", fg="#27272A")

SCRIPT = """
title Login
life A  Browser
life B  Server
full AB POST /login
dash BA 200 <ok> & "welcome"
self B  audit
"""


def small_model() -> Model:
    prims = Primitives()
    prims.add_rect(0, 0, 10, 10)
    prims.add_rect(0, 0, 100, 50)
    prims.add_line(5, 0, 5, 40, dashed=True, kind="lifeline")
    prims.add_line(0, 20, 90, 20)
    prims.add_label("hi", 10, 50, 5, "centre", "top")
    return Model(
        width=100, height=50, font_height=10,
        dash_length=5, dash_gap=2.5, primitives=prims,
    )


# ============================================================================
# Primitive rendering
# ============================================================================


class TestRenderSvg:
    def test_wraps_in_svg_element(self):
        svg = render_svg(small_model(), COLORS)
        assert svg.startswith("<svg ")
        assert svg.endswith("</svg>")
        assert 'viewBox="0 0 100 50"' in svg

    def test_largest_rect_is_drawn_first(self):
        svg = render_svg(small_model(), COLORS)
        rects = re.findall(r'<rect x="[^"]*" y="[^"]*" width="([^"]*)"', svg)
        assert rects == ["100", "10"]

    def test_dashed_lines_use_the_dash_pattern(self):
        svg = render_svg(small_model(), COLORS)
        assert 'stroke-dasharray="5 2.5"' in svg
        assert svg.count("stroke-dasharray") == 1

    def test_lines_are_coloured_by_kind(self):
        prims = Primitives()
        prims.add_line(5, 0, 5, 40, dashed=True, kind="lifeline")
        prims.add_line(0, 20, 90, 20, dashed=True)
        prims.add_line(50, 0, 50, 10, kind="frame")
        model = Model(
            width=100, height=50, font_height=10,
            dash_length=5, dash_gap=2.5, primitives=prims,
        )
        lines = [p for p in render_svg(model, COLORS).splitlines() if p.startswith("<line ")]
        assert 'stroke="var(--_lifeline)" stroke-dasharray="5 2.5"' in lines[0]
        assert 'stroke="var(--_arrow)" stroke-dasharray="5 2.5"' in lines[1]
        assert 'stroke="var(--_box-stroke)"' in lines[2]
        assert "stroke-dasharray" not in lines[2]

    def test_stroke_width_follows_font_height(self):
        assert 'stroke-width="1"' in render_svg(small_model(), COLORS)

    def test_label_justification(self):
        svg = render_svg(small_model(), COLORS)
        assert 'text-anchor="middle"' in svg
        assert 'dominant-baseline="text-before-edge"' in svg
        assert ">hi</text>" in svg

    def test_output_width_keeps_the_aspect_ratio(self):
        svg = render_svg(small_model(), COLORS, output_width=200)
        assert 'width="200" height="100"' in svg

    def test_transparent_background(self):
        assert "background:var(--bg)" in render_svg(small_model(), COLORS)
        assert "background" not in render_svg(small_model(), COLORS, transparent=True).split(">")[0]

    def test_font(self):
        svg = render_svg(small_model(), COLORS, font="Fira Code")
        assert "font-family: 'Fira Code'" in svg
        assert "family=Fira%20Code" in svg


# ============================================================================
# Themes
# ============================================================================


class TestThemes:
    def test_default_colors(self):
        c = resolve_theme(None)
        assert (c.bg, c.fg) == ("#FFFFFF", "#27272A")

    def test_named_theme(self):
        assert resolve_theme("nord") is THEMES["nord"]

    def test_unknown_theme(self):
        with pytest.raises(ValueError, match="Unknown theme"):
            resolve_theme("neon")

    @pytest.mark.parametrize("value, expected", [
        (1.0, "1"), (2.5, "2.5"), (1.239, "1.24"), (0, "0"), (1000.0, "1000"),
    ])
    def test_fmt_num(self, value, expected):
        assert fmt_num(value) == expected


# ============================================================================
# End to end
# ============================================================================


class TestRenderUmli:
    def test_renders_every_label(self):
        svg = render_umli(SCRIPT)
        for text in ("Login", "Browser", "Server", "POST /login", "audit"):
            assert f">{text}</text>" in svg

    def test_return_line_has_the_arrow_colour(self):
        svg = render_umli(SCRIPT)
        dashed_arrows = re.findall(r'<line [^>]*stroke="var\(--_arrow\)" stroke-dasharray', svg)
        assert len(dashed_arrows) == 1

    def test_text_is_escaped(self):
        svg = render_umli(SCRIPT)
        assert "200 &lt;ok&gt; &amp; &quot;welcome&quot;" in svg

    def test_counts_of_elements(self):
        svg = render_umli(SCRIPT)
        # title boxes, activity boxes, frame
        assert svg.count("<rect ") == 5
        assert svg.count("<polygon ") == 3

    def test_svg_is_well_formed_enough(self):
        svg = render_umli(SCRIPT)
        assert svg.count("<svg") == svg.count("</svg>") == 1
        assert len(re.findall(r"<text ", svg)) == svg.count("</text>")

    def test_theme_option(self):
        svg = render_umli(SCRIPT, RenderOptions(theme="github-dark"))
        assert "--bg:#0d1117" in svg
        assert "--accent:#4493f8" in svg

    def test_explicit_colors_override_the_theme(self):
        svg = render_umli(SCRIPT, RenderOptions(theme="nord", bg="#000000"))
        assert "--bg:#000000" in svg
        assert "--fg:#d8dee9" in svg

    def test_output_width(self):
        svg = render_umli(SCRIPT, RenderOptions(output_width=1000))
        assert 'width="1000"' in svg.split(">")[0]

    def test_parse_errors_propagate(self):
        with pytest.raises(ParseError):
            render_umli("life A a\nfull AB hello")

    def test_all_errors_share_a_base(self):
        with pytest.raises(UmliError):
            render_umli("bogus line")

    def test_unknown_theme(self):
        with pytest.raises(ValueError):
            render_umli(SCRIPT, RenderOptions(theme="neon"))
