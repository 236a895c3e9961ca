import logging
from typing import Iterable, List

from pytsvector.lexeme import Lexeme, unique_positions

logger = logging.getLogger(__file__)


def normalize(lexemes: Iterable[Lexeme], owned: bool = False) -> List[Lexeme]:
    """Sort lexemes by text and merge those with equal text, then sort and
       deduplicate the positions of each. Returns a new list of new lexemes.

       Text comparison is by code point, not locale collation.

       If 'owned' is True the position lists inside 'lexemes' belong to us
       (e.g. they were just built by the parser) and are extended in place.
       Otherwise they are copied before the first append."""
    lexemes = sorted(lexemes, key=lambda l: l.text)  # stable
    if not lexemes:
        return []

    merged: List[Lexeme] = []
    text, positions, mine = lexemes[0].text, lexemes[0]._positions, owned
    for lexeme in lexemes[1:]:
        if lexeme.text != text:
            merged.append(Lexeme._owned(text, _unique(positions, mine)))
            text, positions, mine = lexeme.text, lexeme._positions, owned
        elif positions is None:  # positionless lexemes merge into anything
            positions, mine = lexeme._positions, owned
        elif lexeme.count > 0:
            if not mine:
                positions, mine = list(positions), True
            positions.extend(lexeme._positions)
    merged.append(Lexeme._owned(text, _unique(positions, mine)))

    if len(merged) != len(lexemes):
        logger.debug(f"Merged {len(lexemes)} lexemes into {len(merged)}")
    return merged


def _unique(positions, mine):
    """unique_positions() for a list we may or may not own. The result is
       always a list only the new lexeme holds."""
    if positions is None:
        return None
    result = unique_positions(positions)
    if result is positions and not mine:
        result = list(positions)
    return result
