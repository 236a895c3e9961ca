from typing import Iterable, List, Optional

from pytsvector.errors import InvalidArgument, OutOfRange
from pytsvector.position import Position
from pytsvector._private.util import quote


def unique_positions(positions: Optional[List[Position]]) -> Optional[List[Position]]:
    """Sort a position list and remove duplicate positions, keeping the
       highest weight of each duplicate group.

       A list that is already strictly ascending is returned as is, without
       copying. Otherwise a new list is returned and the argument is left
       alone, since a caller may still hold a reference to it."""
    if not positions:
        return positions
    if all(positions[i - 1].pos < positions[i].pos for i in range(1, len(positions))):
        return positions

    positions = sorted(positions, key=lambda p: p.pos)  # sorted() is stable
    a = 0
    for b in range(1, len(positions)):
        if positions[a].pos != positions[b].pos:
            a += 1
            positions[a] = positions[b]
        elif positions[b].weight > positions[a].weight:
            positions[a] = positions[b]
    del positions[a + 1:]
    return positions


class Lexeme:
    """A lexeme: a text string and an optional list of word entry positions."""
    __slots__ = ['_text', '_positions']

    def __init__(self, text: str, positions: Optional[Iterable[Position]] = None):
        """Creates a lexeme. The positions are copied, so the caller's list
           can be changed afterwards without affecting the lexeme."""
        if not isinstance(text, str):
            raise InvalidArgument(f"Lexeme text must be a string, got {text!r}")
        self._text = text
        self._positions = None
        if positions is not None:
            self._positions = list(positions)
            for p in self._positions:
                if not isinstance(p, Position):
                    raise InvalidArgument(f"Not a Position: {p!r}")

    @classmethod
    def _owned(cls, text: str, positions: Optional[List[Position]]) -> 'Lexeme':
        """Creates a lexeme that adopts 'positions' without copying. Only for
           lists nobody else holds, e.g. fresh from the parser."""
        lexeme = cls.__new__(cls)
        lexeme._text = text
        lexeme._positions = positions
        return lexeme

    @property
    def text(self) -> str:
        return self._text

    @property
    def count(self) -> int:
        """The number of word entry positions."""
        return 0 if self._positions is None else len(self._positions)

    @property
    def positions(self) -> tuple:
        return tuple(self._positions or ())

    def __getitem__(self, index: int) -> Position:
        if not isinstance(index, int) or index < 0 or index >= self.count:
            raise OutOfRange(f"Position index out of range: {index!r}")
        return self._positions[index]

    def __len__(self):
        return self.count

    def __iter__(self):
        return iter(self._positions or ())

    def __eq__(self, other):
        if not isinstance(other, Lexeme):
            return NotImplemented
        return self._text == other._text and self.positions == other.positions

    def __hash__(self):
        return hash((self._text, self.positions))

    def __repr__(self):
        if self.count == 0:
            return f"Lexeme({self._text!r})"
        return f"Lexeme({self._text!r}, {list(self.positions)!r})"

    def __str__(self):
        """The lexeme in PostgreSQL's format, e.g. 'fat':2,4B"""
        s = quote(self._text)
        if self.count > 0:
            s += ':' + ','.join(str(p) for p in self._positions)
        return s
