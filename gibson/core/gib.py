"""The GIB document and the game data derived from it."""

import logging
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from gibson.core.errors import GameDataError
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
from gibson.core.utils import parse_int, parse_player_name

logger = logging.getLogger(__name__)

# GRLT codes of GAMEINFOMAIN
RESULT_CODES: dict[int, Callable[[float], GameResult]] = {
    0: lambda score: ScoreResult(Color.BLACK, score),
    1: lambda score: ScoreResult(Color.WHITE, score),
    3: lambda score: ResignationResult(Color.BLACK),
    4: lambda score: ResignationResult(Color.WHITE),
    7: lambda score: TimeResult(Color.BLACK),
    8: lambda score: TimeResult(Color.WHITE),
}


class Gib:
    """A parsed GIB document.

    ``header`` and ``game`` are fixed at construction. Everything else is
    derived from them on first access and cached.
    """

    def __init__(self, header: Mapping[str, str], game: Iterable[GameProperty]) -> None:
        self._header = MappingProxyType(dict(header))
        self._game: tuple[GameProperty, ...] = tuple(game)
        self._cache: dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"Gib(header={dict(self._header)}, game={list(self._game)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gib):
            return NotImplemented
        return dict(self._header) == dict(other._header) and self._game == other._game

    def __hash__(self) -> int:
        return hash((frozenset(self._header.items()), self._game))

    def _cached(self, name: str, compute: Callable[[], Any]) -> Any:
        # concurrent first access may compute twice, the result is the same
        if name not in self._cache:
            self._cache[name] = compute()
        return self._cache[name]

    @property
    def header(self) -> Mapping[str, str]:
        """Raw header properties, values without their delimiters."""
        return self._header

    @property
    def game(self) -> tuple[GameProperty, ...]:
        """Game records in document order."""
        return self._game

    # -------------------------------------------------------------------------
    # Header derived values
    # -------------------------------------------------------------------------

    @property
    def _game_info(self) -> dict[str, str]:
        """GAMEINFOMAIN, a comma separated list of NAME:VALUE pairs."""
        return self._cached("game_info", self._parse_game_info)

    def _parse_game_info(self) -> dict[str, str]:
        """Entries are split at the first colon, so a value keeps any colons of its own
        (GCDT:20:31 gives "20:31", not "20"). Malformed entries are skipped.
        """
        game_info: dict[str, str] = {}
        raw = self._header.get("GAMEINFOMAIN")
        if raw is None:
            return game_info
        for entry in raw.split(","):
            if not entry:
                continue
            name, sep, value = entry.partition(":")
            if not sep:
                logger.warning(f"Ignoring malformed GAMEINFOMAIN entry '{entry}'")
                continue
            game_info[name] = value
        return game_info

    @property
    def komi(self) -> float | None:
        """GAMEGONGJE holds komi times ten."""

        def compute() -> float | None:
            komi = parse_int(self._header.get("GAMEGONGJE"))
            return komi / 10.0 if komi is not None else None

        return self._cached("komi", compute)

    @property
    def game_place(self) -> str | None:
        return self._header.get("GAMEPLACE")

    @property
    def player_black(self) -> str | None:
        return self._header.get("GAMEBLACKNAME")

    @property
    def player_white(self) -> str | None:
        return self._header.get("GAMEWHITENAME")

    def _player_part(self, raw: str | None, index: int) -> str | None:
        if raw is None:
            return None
        return parse_player_name(raw)[index] or None

    @property
    def black_name(self) -> str | None:
        """Black's name without the rank suffix."""
        return self._player_part(self.player_black, 0)

    @property
    def black_rank(self) -> str | None:
        """Black's rank, e.g. '2D' for 'kim (2D)'."""
        return self._player_part(self.player_black, 1)

    @property
    def white_name(self) -> str | None:
        """White's name without the rank suffix."""
        return self._player_part(self.player_white, 0)

    @property
    def white_rank(self) -> str | None:
        """White's rank, e.g. '2D' for 'wildsim1 (2D)'."""
        return self._player_part(self.player_white, 1)

    @property
    def _game_score(self) -> float:
        """GAMEZIPSU holds the score margin times ten, missing means 0."""
        score = parse_int(self._header.get("GAMEZIPSU"))
        return score / 10.0 if score is not None else 0.0

    @property
    def game_result(self) -> GameResult | None:
        """The outcome, from the GRLT code of GAMEINFOMAIN. None if missing or unknown."""

        def compute() -> GameResult | None:
            code = parse_int(self._game_info.get("GRLT"))
            make_result = RESULT_CODES.get(code)
            if make_result is None:
                return None
            return make_result(self._game_score)

        return self._cached("game_result", compute)

    @property
    def time_settings(self) -> TimeSettings | None:
        """GTIME of GAMEINFOMAIN: <main time>-<overtime seconds>-<overtime periods>."""

        def compute() -> TimeSettings | None:
            raw = self._game_info.get("GTIME")
            if raw is None:
                return None
            parts = [parse_int(part) for part in raw.split("-")]
            if len(parts) != 3 or None in parts:
                return None
            return TimeSettings(*parts)

        return self._cached("time_settings", compute)

    @property
    def game_date(self) -> datetime | None:
        """GAMEDATE, '<year>-<month>-<day>-<hour>-<minute>-<second>' with padded parts, as UTC."""

        def compute() -> datetime | None:
            raw = self._header.get("GAMEDATE")
            if raw is None:
                return None
            parts = [parse_int(part.strip()) for part in raw.split("-")]
            if len(parts) != 6 or None in parts:
                return None
            try:
                return datetime(*parts, tzinfo=timezone.utc)
            except ValueError:
                logger.warning(f"GAMEDATE '{raw}' is not a valid date")
                return None

        return self._cached("game_date", compute)

    # -------------------------------------------------------------------------
    # Game derived values
    # -------------------------------------------------------------------------

    @property
    def handicap(self) -> int:
        """Handicap of the INI record, 0 if there is none.

        Raises:
            GameDataError: If the game declares its handicap more than once
        """

        def compute() -> int:
            handicaps = [p.handicap for p in self._game if isinstance(p, InitProperty)]
            if len(handicaps) > 1:
                raise GameDataError(
                    f"Expected at most one INI record, found {len(handicaps)}",
                    user_message="The game record declares its handicap more than once.",
                    context={"handicaps": handicaps},
                )
            return handicaps[0] if handicaps else 0

        return self._cached("handicap", compute)

    @property
    def starting_color(self) -> Color:
        """White moves first in handicap games."""
        return Color.WHITE if self.handicap >= 2 else Color.BLACK

    def color_of(self, move_number: int) -> Color:
        """Colour playing the given move number, alternating from the starting colour."""
        return self._color_of(move_number, self.starting_color)

    @staticmethod
    def _color_of(move_number: int, starting_color: Color) -> Color:
        return starting_color if move_number % 2 == 1 else starting_color.opponent

    @property
    def moves(self) -> tuple[Move, ...]:
        """All moves and passes in document order, INI records dropped."""

        def compute() -> tuple[Move, ...]:
            starting_color = self.starting_color
            moves: list[Move] = []
            for p in self._game:
                if isinstance(p, MoveProperty):
                    moves.append(PointMove(p.color, p.move_number, p.x, p.y))
                elif isinstance(p, PassProperty):
                    moves.append(PassMove(self._color_of(p.move_number, starting_color), p.move_number))
            return tuple(moves)

        return self._cached("moves", compute)
