"""Semantic extraction of a GIB parse tree.

Turns the tree produced by gib.lark into the raw header mapping and the
ordered game properties, decoding record fields on the way.
"""

import logging
from typing import Callable

from lark import Token, Tree

from gibson.core.errors import SemanticError
from gibson.core.marker import Marker
from gibson.core.models import Color, GameProperty, InitProperty, MoveProperty, PassProperty
from gibson.core.utils import parse_int

logger = logging.getLogger(__name__)

COLOR_CODES = {1: Color.BLACK, 2: Color.WHITE}


def token_to_int(token: Token) -> int:
    """Decodes a base-10 integer field.

    Raises:
        SemanticError: If the field isn't an integer
    """
    text = str(token)
    value = parse_int(text)
    if value is None:
        raise SemanticError(f"expected an integer, but got '{text}'", Marker.from_token(token))
    return value


def token_to_color(token: Token) -> Color:
    """Decodes a colour field, 1 is black and 2 is white."""
    code = token_to_int(token)
    color = COLOR_CODES.get(code)
    if color is None:
        raise SemanticError(f"expected either '1' or '2', but got '{token}'", Marker.from_token(token))
    return color


def _fields(tree: Tree) -> list[Token]:
    return [child for child in tree.children if isinstance(child, Token) and child.type == "FIELD"]


def _extract_move(tree: Tree) -> MoveProperty:
    _, move_number, color, x, y = _fields(tree)
    return MoveProperty(token_to_int(move_number), token_to_color(color), token_to_int(x), token_to_int(y))


def _extract_pass(tree: Tree) -> PassProperty:
    _, move_number = _fields(tree)
    return PassProperty(token_to_int(move_number))


def _extract_init(tree: Tree) -> InitProperty:
    _, _, handicap_token = _fields(tree)
    handicap = token_to_int(handicap_token)
    if handicap < 0:
        raise SemanticError(
            f"expected a non-negative handicap, but got '{handicap_token}'", Marker.from_token(handicap_token)
        )
    return InitProperty(handicap)


GAME_PROPERTY_EXTRACTORS: dict[str, Callable[[Tree], GameProperty]] = {
    "move": _extract_move,
    "pass": _extract_pass,
    "init": _extract_init,
}


def extract_game_property(tree: Tree) -> GameProperty | None:
    """Returns the property for a game record, or None for records that carry no game data."""
    extractor = GAME_PROPERTY_EXTRACTORS.get(tree.data)
    if extractor is None:
        logger.debug(f"Skipping game record '{tree.data}' on line {getattr(tree.meta, 'line', '?')}")
        return None
    return extractor(tree)


def extract_header_property(tree: Tree) -> tuple[str, str]:
    identifier, value = tree.children
    # VALUE is "=" <value> "\]"
    return str(identifier), str(value)[1:-2]


def _subtree(tree: Tree, name: str) -> Tree:
    for child in tree.children:
        if isinstance(child, Tree) and child.data == name:
            return child
    raise ValueError(f"Parse tree has no '{name}' node")


def extract_header(tree: Tree) -> dict[str, str]:
    # later duplicates overwrite earlier ones
    return dict(extract_header_property(child) for child in tree.children if isinstance(child, Tree))


def extract_game(tree: Tree) -> list[GameProperty]:
    game = []
    for child in tree.children:
        if not isinstance(child, Tree):
            continue
        game_property = extract_game_property(child)
        if game_property is not None:
            game.append(game_property)
    return game


def extract(tree: Tree) -> tuple[dict[str, str], list[GameProperty]]:
    """Extracts header and game properties from the tree of a whole document.

    Args:
        tree: The ``start`` tree produced by the GIB grammar

    Returns:
        Tuple of the header mapping and the game properties in document order

    Raises:
        SemanticError: If a record field can't be decoded
    """
    return extract_header(_subtree(tree, "header")), extract_game(_subtree(tree, "game"))
