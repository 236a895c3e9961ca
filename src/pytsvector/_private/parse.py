from enum import Enum, auto
from typing import List

from pytsvector.errors import FormatError, InvalidArgument
from pytsvector.lexeme import Lexeme
from pytsvector.position import Position, Weight


class State(Enum):
    WAIT_WORD = auto()               # between lexemes
    WAIT_END_WORD = auto()           # inside an unquoted lexeme
    WAIT_NEXT_CHAR = auto()          # after a backslash in an unquoted lexeme
    WAIT_END_COMPLEX = auto()        # inside a quoted lexeme
    WAIT_CHAR_COMPLEX = auto()       # just saw a quote inside a quoted lexeme
    IN_POS_INFO = auto()             # expecting the digits of a position
    WAIT_POS_WEIGHT_OR_DELIM = auto()
    WAIT_POS_DELIM = auto()
    FINISH = auto()


class TsVectorParse:
    # '*' is accepted as A for compatibility with the server's input routine
    weights = {'A': Weight.A, 'a': Weight.A, '*': Weight.A,
               'B': Weight.B, 'b': Weight.B,
               'C': Weight.C, 'c': Weight.C,
               'D': Weight.D, 'd': Weight.D}

    def __init__(self, text: str):
        """Run the state machine over 'text'. The lexemes are left in self.lexemes,
           in input order, neither sorted nor merged."""
        if text is None:
            raise InvalidArgument("Cannot parse None as a tsvector")
        if not isinstance(text, str):
            raise InvalidArgument(f"Cannot parse {type(text).__name__} as a tsvector")
        self.text = text
        self.lexemes: List[Lexeme] = []
        self.pos = 0
        self.word: List[str] = []
        self.positions: List[Position] = []
        self.wordpos = 0
        self.tokenize()

    def tokenize(self) -> List[Lexeme]:
        transitions = {State.WAIT_WORD: self._wait_word,
                       State.WAIT_END_WORD: self._wait_end_word,
                       State.WAIT_NEXT_CHAR: self._wait_next_char,
                       State.WAIT_END_COMPLEX: self._wait_end_complex,
                       State.WAIT_CHAR_COMPLEX: self._wait_char_complex,
                       State.IN_POS_INFO: self._in_pos_info,
                       State.WAIT_POS_WEIGHT_OR_DELIM: self._wait_pos_weight_or_delim,
                       State.WAIT_POS_DELIM: self._wait_pos_delim}
        state = State.WAIT_WORD
        while state != State.FINISH:
            state = transitions[state]()
        return self.lexemes

    def _at_end(self) -> bool:
        return self.pos >= len(self.text)

    def _current(self) -> str:
        return self.text[self.pos]

    def _emit(self, positions=None):
        self.lexemes.append(Lexeme._owned(''.join(self.word), positions))

    def _error_report(self, errorstring):
        raise FormatError(errorstring, ("", 1, self.pos + 1, self.text))

    def _wait_word(self) -> State:
        while not self._at_end() and self._current().isspace():
            self.pos += 1
        if self._at_end():
            return State.FINISH
        self.word = []
        c = self._current()
        self.pos += 1
        if c == "'":
            return State.WAIT_END_COMPLEX
        if c == '\\':
            return State.WAIT_NEXT_CHAR
        self.word.append(c)
        return State.WAIT_END_WORD

    def _wait_next_char(self) -> State:
        if self._at_end():
            self._error_report("Missing escaped character after \\ at end of value")
        self.word.append(self._current())
        self.pos += 1
        return State.WAIT_END_WORD

    def _wait_end_word(self) -> State:
        if self._at_end() or self._current().isspace():
            self._emit()
            return State.WAIT_WORD
        c = self._current()
        self.pos += 1
        if c == '\\':
            return State.WAIT_NEXT_CHAR
        if c == ':':
            self.positions = []
            return State.IN_POS_INFO
        self.word.append(c)
        return State.WAIT_END_WORD

    def _wait_end_complex(self) -> State:
        if self._at_end():
            self._error_report("Unexpected end of value, missing closing quote")
        c = self._current()
        self.pos += 1
        if c == "'":
            return State.WAIT_CHAR_COMPLEX
        if c == '\\':
            if self._at_end():
                self._error_report("Missing escaped character after \\ at end of value")
            c = self._current()
            self.pos += 1
        self.word.append(c)
        return State.WAIT_END_COMPLEX

    def _wait_char_complex(self) -> State:
        if self._at_end() or self._current().isspace():
            self._emit()
            return State.WAIT_WORD
        c = self._current()
        if c == "'":  # '' is a literal quote
            self.word.append("'")
            self.pos += 1
            return State.WAIT_END_COMPLEX
        if c == ':':
            self.pos += 1
            self.positions = []
            return State.IN_POS_INFO
        self._error_report(f"Unexpected character {c!r} after closing quote")

    def _in_pos_info(self) -> State:
        start = self.pos
        while not self._at_end() and '0' <= self._current() <= '9':
            self.pos += 1
        if start == self.pos:
            self._error_report("Missing position after :")
        digits = self.text[start:self.pos].lstrip("0")
        if not digits:
            self.wordpos = 0
        elif len(digits) > 5:  # clamped by Position anyway
            self.wordpos = Position.MAX_POS + 1
        else:
            self.wordpos = int(digits)
        return State.WAIT_POS_WEIGHT_OR_DELIM

    def _wait_pos_weight_or_delim(self) -> State:
        weight = Weight.D
        if not self._at_end() and self._current() in self.weights:
            weight = self.weights[self._current()]
            self.pos += 1
        self.positions.append(Position(self.wordpos, weight))
        return State.WAIT_POS_DELIM

    def _wait_pos_delim(self) -> State:
        if self._at_end() or self._current().isspace():
            self._emit(self.positions)
            return State.WAIT_WORD
        if self._current() == ',':
            self.pos += 1
            return State.IN_POS_INFO
        self._error_report("Missing comma, whitespace or end of value after lexeme position info")


def parse_lexemes(text: str) -> List[Lexeme]:
    """Parse tsvector text into its raw, unnormalized list of lexemes."""
    return TsVectorParse(text).lexemes
