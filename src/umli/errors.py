from __future__ import annotations

# ============================================================================
# Exceptions
#
# None of these are recovered inside the package. Diagram creation is
# deterministic, so each one signals bad input or a programming error and
# the whole creation attempt is abandoned.
# ============================================================================


class UmliError(Exception):
    """Base class for every error raised by umli."""


class ParseError(UmliError, ValueError):
    """A line of DSL text could not be parsed."""

    def __init__(self, line: str, line_number: int, reason: str) -> None:
        self.line = line
        self.line_number = line_number
        self.reason = reason
        super().__init__(
            f"Error on this line <{line}> (line: {line_number}): {reason}"
        )


class UnknownLifelineError(UmliError, KeyError):
    """A lifeline was referenced that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown lifeline: {self.name}"


class UnknownSizeError(UmliError, KeyError):
    """A sizer was asked for a property it does not know."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown size property: {self.name}"


class ActivityBoxError(UmliError, RuntimeError):
    """An activity box was terminated when none was in progress."""
