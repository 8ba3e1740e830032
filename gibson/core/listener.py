"""Conversion of lark lexing/parsing failures into gibson parse errors.

Lark raises on the first unexpected character or token when no error
handler is installed, so the first failure aborts the whole parse.
"""

import logging
from collections.abc import Iterable

from lark import Token
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from gibson.core.errors import LexicalError, ParseError, SyntacticError
from gibson.core.marker import Marker

logger = logging.getLogger(__name__)

# Human readable names for the terminals of gib.lark
TERMINAL_NAMES = {
    "_HEADER_START": "'\\HS'",
    "_HEADER_END": "'\\HE'",
    "_GAME_START": "'\\GS'",
    "_GAME_END": "'\\GE'",
    "_PROPERTY_START": "'\\['",
    "IDENTIFIER": "property identifier",
    "VALUE": "property value",
    "_STO": "'STO'",
    "_SKI": "'SKI'",
    "_INI": "'INI'",
    "FIELD": "record field",
    "INT": "integer",
    "TAIL": "'&' marker",
    "_NL": "end of line",
    "$END": "end of input",
}


def describe_terminals(names: Iterable[str]) -> str:
    return ", ".join(sorted(TERMINAL_NAMES.get(name, name) for name in names))


def _describe_token(token: Token) -> str:
    if token.type == "$END":
        return "end of input"
    if token.type == "_NL":
        return "end of line"
    return f"'{token}'"


def to_parse_error(error: UnexpectedInput) -> ParseError:
    """Converts a lark failure into the matching ParseError subclass.

    Args:
        error: The exception raised by lark's lexer or parser

    Returns:
        LexicalError for unexpected characters, SyntacticError for
        unexpected tokens and premature end of input
    """
    if isinstance(error, UnexpectedCharacters):
        marker = Marker.at(error.line, error.column)
        description = f"unexpected character '{error.char}'"
        if error.allowed:
            description += f", expected one of: {describe_terminals(error.allowed)}"
        parse_error: ParseError = LexicalError(description, marker, error)
    elif isinstance(error, UnexpectedToken):
        token = error.token
        if token.type == "$END":
            # lark borrows the position of the last token, end of input has no width
            marker = Marker(token.line, token.column, token.line, token.column)
        else:
            marker = Marker.from_token(token)
        description = f"unexpected {_describe_token(token)}"
        if error.expected:
            description += f", expected one of: {describe_terminals(error.expected)}"
        parse_error = SyntacticError(description, marker, error)
    else:
        # UnexpectedEOF, positions are -1 when lark has no token to point at
        line = error.line if error.line > 0 else 1
        column = error.column if error.column > 0 else 1
        parse_error = SyntacticError(
            f"unexpected end of input, expected one of: {describe_terminals(error.expected)}",
            Marker(line, column, line, column),
            error,
        )

    logger.debug(f"GIB parse failed: {parse_error}")
    return parse_error
