"""GIB Data Models.

This module defines the value types produced by the parser and the
views derived from them:
- GameProperty: raw records of the game block (STO, INI, SKI)
- Move: colour-resolved moves
- GameResult: decoded game outcome
- TimeSettings: main time and overtime

All dataclasses are frozen (immutable).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """Stone colour."""

    BLACK = "B"
    WHITE = "W"

    @property
    def opponent(self) -> "Color":
        """Returns the opposing colour, i.e. W <-> B"""
        return Color.WHITE if self is Color.BLACK else Color.BLACK


# =============================================================================
# Game block records
# =============================================================================


@dataclass(frozen=True)
class GameProperty:
    """Base class of the records found in the game block."""


@dataclass(frozen=True)
class MoveProperty(GameProperty):
    """A stone placement (STO record). x and y are zero-based."""

    move_number: int
    color: Color
    x: int
    y: int


@dataclass(frozen=True)
class InitProperty(GameProperty):
    """Game setup (INI record), declares the handicap."""

    handicap: int


@dataclass(frozen=True)
class PassProperty(GameProperty):
    """A pass (SKI record). The colour is not recorded by the format."""

    move_number: int


# =============================================================================
# Derived views
# =============================================================================


@dataclass(frozen=True)
class Move:
    """A move with its colour resolved."""

    color: Color
    move_number: int


@dataclass(frozen=True)
class PointMove(Move):
    x: int
    y: int


@dataclass(frozen=True)
class PassMove(Move):
    pass


@dataclass(frozen=True)
class GameResult:
    """Outcome of a game."""

    winner: Color


@dataclass(frozen=True)
class ScoreResult(GameResult):
    """Win by counting. score is the margin in points."""

    score: float


@dataclass(frozen=True)
class ResignationResult(GameResult):
    pass


@dataclass(frozen=True)
class TimeResult(GameResult):
    """Win because the opponent ran out of time."""

    pass


@dataclass(frozen=True)
class TimeSettings:
    """Clock settings of a game.

    Attributes:
        time_limit: Main time in seconds.
        overtime_seconds: Length of one overtime (byo-yomi) period in seconds.
        overtime_periods: Number of overtime periods.
    """

    time_limit: int
    overtime_seconds: int
    overtime_periods: int
