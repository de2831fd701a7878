from __future__ import annotations

import logging
import re

from .errors import ParseError
from .types import KEYWORDS, Model, Statement

logger = logging.getLogger(__name__)

# ============================================================================
# umli DSL parser
#
# One statement per line; blank lines are ignored. Lifelines are named by a
# single upper case letter and must be declared before they are used.
#
# Supported syntax:
#   title  Order service | happy path
#   life A  SL App
#   full AB  edit_facilities( | payload, user_token)
#   dash BA  permissions_list
#   self A   [has permission] | store changes
#   stop B
#   textsize 12
#   showletters false
#
# A "|" in label text starts a new row.
# ============================================================================

_ONE_LANE_RE = re.compile(r"^[A-Z]$")
_TWO_LANES_RE = re.compile(r"^[A-Z]{2}$")

MIN_TEXT_SIZE = 5.0
MAX_TEXT_SIZE = 20.0


def parse(text: str) -> Model:
    """Parse umli DSL text into a Model.

    Raises ParseError describing the first offending line.
    """
    model = Model()
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        model.append(_parse_line(model, line, line_number))
    logger.debug(
        "Parsed %d statements (%d lifelines)",
        len(model.statements), len(model.lifeline_statements()),
    )
    return model


def split_label(text: str) -> list[str]:
    """Split label text into rows at each "|", trimming each row."""
    return [seg.strip() for seg in text.split("|")]


def _parse_line(model: Model, line: str, line_number: int) -> Statement:
    def fail(reason: str) -> ParseError:
        return ParseError(line, line_number, reason)

    words = line.split(None, 2)
    if len(words) < 2:
        raise fail("must have at least 2 words")
    keyword = words[0]
    if keyword not in KEYWORDS:
        raise fail(f"unrecognized keyword: {keyword}")

    if keyword == "textsize":
        try:
            size = float(words[1])
        except ValueError:
            size = -1.0
        if len(words) > 2 or not MIN_TEXT_SIZE <= size <= MAX_TEXT_SIZE:
            raise fail(
                f"textsize must be a number between {MIN_TEXT_SIZE:g} and {MAX_TEXT_SIZE:g}"
            )
        return Statement(keyword="textsize", text_size=size)

    if keyword == "showletters":
        value = words[1].lower()
        if len(words) > 2 or value not in ("true", "false"):
            raise fail("showletters must be true or false")
        return Statement(keyword="showletters", show_letters=value == "true")

    if keyword == "title":
        # Everything after the keyword is the label
        return Statement(keyword="title", label_segments=split_label(line.split(None, 1)[1]))

    lanes = words[1]
    label_text = words[2] if len(words) > 2 else ""

    if keyword in ("life", "stop", "self"):
        if not _ONE_LANE_RE.match(lanes):
            raise fail("Lane name must be single, upper case letter")
        referenced = [lanes]
    else:
        if not _TWO_LANES_RE.match(lanes):
            raise fail("Lifelines specified must be two, upper case letters")
        if lanes[0] == lanes[1]:
            raise fail("Lifelines specified must differ, use self instead")
        referenced = list(lanes)

    if keyword == "life":
        if model.lifeline_is_known(lanes):
            raise fail(f"Lifeline already declared: {lanes}")
        if not label_text:
            raise fail("Label text missing")
        return Statement(
            keyword="life", lifeline_name=lanes, label_segments=split_label(label_text)
        )

    for lane in referenced:
        if not model.lifeline_is_known(lane):
            raise fail(f"Unknown lane: {lane}")

    if keyword == "stop":
        return Statement(keyword="stop", referenced_lifelines=referenced)

    if not label_text:
        raise fail("Label text missing")
    return Statement(
        keyword=keyword,  # type: ignore[arg-type]
        referenced_lifelines=referenced,
        label_segments=split_label(label_text),
    )
