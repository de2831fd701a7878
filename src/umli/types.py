from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal

# ============================================================================
# DSL types
#
# Models the parsed representation of a umli script: an ordered list of
# statements, one per non-blank line.
# ============================================================================

Keyword = Literal[
    "life",         # declares a lifeline
    "title",        # diagram title
    "full",         # synchronous call, solid line
    "dash",         # return, dashed line
    "self",         # call from a lifeline to itself
    "stop",         # ends the activity box on a lifeline
    "textsize",     # font height as a proportion of diagram width
    "showletters",  # whether lifeline letters are added to their titles
]

KEYWORDS: tuple[Keyword, ...] = (
    "life", "title", "full", "dash", "self", "stop", "textsize", "showletters",
)

DEFAULT_TITLE = "Title Unspecified"


@dataclass(slots=True)
class Statement:
    keyword: Keyword
    # Single upper case letter, set only on "life" statements
    lifeline_name: str = ""
    # Letters of the lifelines this statement refers to (0, 1 or 2 of them)
    referenced_lifelines: list[str] = field(default_factory=list)
    # Label text, one entry per row
    label_segments: list[str] = field(default_factory=list)
    # Only on "textsize" statements
    text_size: float | None = None
    # Only on "showletters" statements
    show_letters: bool | None = None


@dataclass(slots=True)
class Model:
    """Parsed umli script -- statements in script order."""
    statements: list[Statement] = field(default_factory=list)

    def append(self, statement: Statement) -> None:
        self.statements.append(statement)

    def lifeline_statements(self) -> list[Statement]:
        return [s for s in self.statements if s.keyword == "life"]

    def lifeline_statement_by_name(self, name: str) -> Statement | None:
        for s in self.lifeline_statements():
            if s.lifeline_name == name:
                return s
        return None

    def lifeline_is_known(self, name: str) -> bool:
        return self.lifeline_statement_by_name(name) is not None

    def first_statement_of_type(self, keyword: Keyword) -> Statement | None:
        for s in self.statements:
            if s.keyword == keyword:
                return s
        return None

    def size_from_text_statement(self) -> float | None:
        s = self.first_statement_of_type("textsize")
        return s.text_size if s is not None else None

    def lifeline_letters_suppressed(self) -> bool:
        s = self.first_statement_of_type("showletters")
        return s is not None and s.show_letters is False

    def with_lifeline_letters(self) -> Model:
        """Copy of the model with each lifeline's letter added to its title.

        The letter goes on its own row, after a blank row.
        """
        statements: list[Statement] = []
        for s in self.statements:
            if s.keyword == "life":
                s = replace(
                    s, label_segments=[*s.label_segments, "", s.lifeline_name]
                )
            statements.append(s)
        return Model(statements=statements)

    def title(self) -> list[str]:
        s = self.first_statement_of_type("title")
        if s is None:
            return [DEFAULT_TITLE]
        return list(s.label_segments)


# ============================================================================
# Render options
# ============================================================================


@dataclass(slots=True)
class RenderOptions:
    bg: str | None = None
    fg: str | None = None
    line: str | None = None
    accent: str | None = None
    muted: str | None = None
    surface: str | None = None
    border: str | None = None
    # Named palette from theme.THEMES; explicit colors above override it
    theme: str | None = None
    font: str | None = None
    transparent: bool | None = None
    # Rendered width in px; the diagram keeps its aspect ratio
    output_width: float | None = None
