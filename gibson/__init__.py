"""Gibson - parser for Tygem GIB game records.

Example usage:
    >>> from pathlib import Path
    >>> import gibson
    >>> gib = gibson.parse(Path("game.gib"))
    >>> gib.player_black, gib.komi, gib.game_result
    ('kim (2D)', 6.5, TimeResult(winner=<Color.WHITE: 'W'>))
    >>> gib.moves[0]
    PointMove(color=<Color.BLACK: 'B'>, move_number=1, x=15, y=3)
"""

from gibson.common.options import ParseOptions
from gibson.core.errors import GameDataError, GibError, LexicalError, ParseError, SemanticError, SyntacticError
from gibson.core.gib import Gib
from gibson.core.marker import Marker
from gibson.core.models import (
    Color,
    GameProperty,
    GameResult,
    InitProperty,
    Move,
    MoveProperty,
    PassMove,
    PassProperty,
    PointMove,
    ResignationResult,
    ScoreResult,
    TimeResult,
    TimeSettings,
)
from gibson.core.parser import parse, parse_bytes, parse_file, parse_stream, parse_string

__version__ = "0.1.4"

__all__ = [
    # Parsing
    "parse",
    "parse_string",
    "parse_bytes",
    "parse_file",
    "parse_stream",
    "ParseOptions",
    # Document
    "Gib",
    "Color",
    "GameProperty",
    "MoveProperty",
    "InitProperty",
    "PassProperty",
    "Move",
    "PointMove",
    "PassMove",
    "GameResult",
    "ScoreResult",
    "ResignationResult",
    "TimeResult",
    "TimeSettings",
    # Errors
    "Marker",
    "GibError",
    "ParseError",
    "LexicalError",
    "SyntacticError",
    "SemanticError",
    "GameDataError",
]
