import logging
from enum import IntEnum

from pytsvector.errors import InvalidArgument

logger = logging.getLogger(__file__)


class Weight(IntEnum):
    """The weight of a position, labeled A to D. D is the default and is never printed."""
    D = 0
    C = 1
    B = 2
    A = 3


class Position:
    """A word entry position: where in the document a lexeme occurs, plus a weight.

       Both live in a single 16 bit value, weight in the top 2 bits and the
       position in the low 14. The packed value is private; use `pos` and
       `weight`."""
    __slots__ = ['_val']

    MAX_POS = (1 << 14) - 1

    def __init__(self, pos: int, weight=Weight.D):
        """Creates a position.

        :param pos: the position, 1 to 16383. Larger numbers are silently set to 16383.
        :param weight: a Weight (or its integer value 0-3), D by default
        """
        if isinstance(pos, bool) or not isinstance(pos, int):
            raise InvalidArgument(f"Lexeme position must be an integer, got {pos!r}")
        if pos <= 0:
            raise InvalidArgument("Lexeme position is out of range. Min value is 1, "
                                  f"max value is 2^14-1. Value was: {pos}")
        if isinstance(weight, bool) or not isinstance(weight, int) or \
                not Weight.D <= weight <= Weight.A:
            raise InvalidArgument(f"Invalid weight: {weight!r}")
        if pos >> 14:
            logger.debug(f"Clamping position {pos} to {self.MAX_POS}")
            pos = self.MAX_POS
        self._val = (int(weight) << 14) | pos

    @property
    def pos(self) -> int:
        """The position in the text, 1 to 16383."""
        return self._val & self.MAX_POS

    @property
    def weight(self) -> Weight:
        return Weight((self._val >> 14) & 3)

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return self._val == other._val

    def __hash__(self):
        return hash(self._val)

    def __setattr__(self, name, value):
        if hasattr(self, '_val'):
            raise AttributeError("Position is immutable")
        object.__setattr__(self, name, value)

    def __getstate__(self):
        return self._val

    def __setstate__(self, state):
        object.__setattr__(self, '_val', state)

    def __repr__(self):
        return f"Position({self.pos}, Weight.{self.weight.name})"

    def __str__(self):
        """Position followed by the weight letter, e.g. '3B'; D is left out."""
        if self.weight != Weight.D:
            return f"{self.pos}{self.weight.name}"
        return str(self.pos)
