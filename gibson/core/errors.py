"""
Gibson exception hierarchy.

Provides a base exception class with user-facing messages and debug context,
plus the parse errors raised while reading a GIB document.
"""

from typing import Any

from gibson.core.marker import Marker


class GibError(Exception):
    """Base exception for all gibson errors.

    Attributes:
        user_message: Safe, user-facing error message.
        context: Dictionary of debug information.
    """

    def __init__(
        self,
        message: str,
        *,
        user_message: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.user_message = user_message or message
        self.context = context or {}


class ParseError(GibError):
    """A GIB document could not be parsed.

    Attributes:
        description: What went wrong.
        marker: Where in the document it went wrong.
        cause: The underlying exception, if any.
    """

    def __init__(self, description: str, marker: Marker, cause: BaseException | None = None):
        super().__init__(
            f"gib parse error, on line {marker.start_line}, column {marker.start_column}: {description}",
            user_message=description,
            context={"marker": marker},
        )
        self.description = description
        self.marker = marker
        self.cause = cause

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.description == other.description
            and self.marker == other.marker
        )

    def __hash__(self) -> int:
        return hash((type(self), self.description, self.marker))


class LexicalError(ParseError):
    """Input contains characters that don't form any GIB token."""

    pass


class SyntacticError(ParseError):
    """Tokens are not arranged the way the GIB grammar requires."""

    pass


class SemanticError(ParseError):
    """A well-formed record holds a value that can't be decoded."""

    pass


class GameDataError(GibError):
    """A parsed document holds contradictory game data."""

    pass
