import bisect
import pickle
from typing import Any, Dict, Iterable, List, Optional, cast

from pytsvector.errors import InvalidArgument, OutOfRange
from pytsvector.lexeme import Lexeme
from pytsvector.position import Position, Weight
from pytsvector._private import util
from pytsvector._private.normalize import normalize


class TsVector:
    # ==================
    # Initializers
    # ==================

    def __init__(self, lexemes: Iterable[Lexeme] = ()):
        """Creates a tsvector from a list of lexemes.

        :param lexemes: an iterable of Lexeme objects, in any order

        The lexemes are sorted by text and lexemes with the same text are
        merged, their positions sorted and deduplicated (the highest weight
        wins when two positions coincide). The lexemes passed in are not
        modified.
        """
        lexemes = list(lexemes)
        for lexeme in lexemes:
            if not isinstance(lexeme, Lexeme):
                raise InvalidArgument(f"Not a Lexeme: {lexeme!r}")
        self._lexemes = normalize(lexemes)
        self._texts = [l.text for l in self._lexemes]

    @classmethod
    def _from_owned(cls, lexemes: List[Lexeme]) -> 'TsVector':
        """Build from lexemes whose position lists nobody else holds."""
        tsv = cls.__new__(cls)
        tsv._lexemes = normalize(lexemes, owned=True)
        tsv._texts = [l.text for l in tsv._lexemes]
        return tsv

    @classmethod
    def parse(cls, text: str) -> 'TsVector':
        """Parses a tsvector in PostgreSQL's text format, e.g.
           "'a':1A 'cat':5 'fat':2B,4C".
           Raises InvalidArgument for None and FormatError for malformed text."""
        from pytsvector._private.parse import parse_lexemes
        return cls._from_owned(parse_lexemes(text))

    # ==================
    # Accessors
    # ==================

    @property
    def count(self) -> int:
        """The number of lexemes."""
        return len(self._lexemes)

    @property
    def lexemes(self) -> tuple:
        return tuple(self._lexemes)

    def lexeme(self, text: str) -> Optional[Lexeme]:
        """Returns the lexeme with the given text, or None."""
        idx = bisect.bisect_left(self._texts, text)
        if idx < len(self._texts) and self._texts[idx] == text:
            return self._lexemes[idx]
        return None

    # ==================
    # Text format
    # ==================

    def to_text(self) -> str:
        """The canonical text form: quoted lexemes, separated by spaces."""
        return ' '.join(str(l) for l in self._lexemes)

    # ==================
    # Saving and Loading
    # ==================

    def todict(self) -> Dict[str, Any]:
        """Create a dictionary form of the tsvector for export to JSON.
           Weights are given as letters."""
        return {"lexemes": [{"text": l.text,
                             "positions": [[p.pos, p.weight.name] for p in l]}
                            for l in self._lexemes]}

    @classmethod
    def fromdict(cls, tsvdict: Dict) -> 'TsVector':
        """Recreate a tsvector from dictionary form. The lexemes are validated
           and normalized again, so the dict need not be sorted."""
        try:
            entries = tsvdict["lexemes"]
        except (KeyError, TypeError):
            raise InvalidArgument("Dictionary has no 'lexemes' entry")
        lexemes = []
        for entry in entries:
            try:
                text, entrypositions = entry["text"], entry.get("positions", [])
                pairs = [(pos, weight) for pos, weight in entrypositions]
            except (KeyError, TypeError, AttributeError, ValueError):
                raise InvalidArgument(f"Malformed lexeme entry: {entry!r}")
            positions = []
            for pos, weight in pairs:
                if isinstance(weight, str):
                    if weight not in Weight.__members__:
                        raise InvalidArgument(f"Invalid weight: {weight!r}")
                    weight = Weight[weight]
                positions.append(Position(pos, weight))
            lexemes.append(Lexeme._owned(text, positions or None))
        for lexeme in lexemes:
            if not isinstance(lexeme.text, str):
                raise InvalidArgument(f"Lexeme text must be a string, got {lexeme.text!r}")
        return cls._from_owned(lexemes)

    def save(self, path: str):
        """Saves the tsvector to a file.
        Args:
            path (str): The path to save to (a `.tsv` extension is added if missing)
        """
        if not path.endswith('.tsv'):
            path = path + '.tsv'
        with open(path, 'wb') as f:
            pickle.dump(self, f)

    @classmethod
    def load(cls, path: str) -> 'TsVector':
        """Loads a tsvector from a .tsv file written by save()."""
        if not path.endswith('.tsv'):
            path = path + '.tsv'
        with open(path, 'rb') as f:
            tsv = pickle.load(f)
        if not isinstance(tsv, cls):
            raise InvalidArgument(f"{path} does not contain a TsVector")
        return tsv

    # ==================
    # Rendering
    # ==================

    def view(self, show_weights=True) -> 'graphviz.Digraph':
        """Creates a 'graphviz.Digraph' object with a node per lexeme and an
           edge per position. Will automatically display in Jupyter.

            :param show_weights: label edges with the position and weight, e.g. 1A;
                                 if False only the position number is shown
            :return: A Digraph object

           If you would like to display the tsvector from a non-Jupyter environment, please use :code:`TsVector.render`
        """
        import graphviz
        if not util.check_graphviz_installed():
            raise EnvironmentError("Graphviz executable not found. Please install [Graphviz](https://www.graphviz.org/download/). On macOS, use `brew install graphviz`.")

        g = graphviz.Digraph('TsVector', graph_attr={"rankdir": "LR"})
        g.attr('node', shape='box', style='filled')
        for idx, lexeme in enumerate(self._lexemes):
            g.node(f"l{idx}", label=graphviz.escape(lexeme.text))
        g.attr('node', shape='circle', style='')
        for pos in sorted({p.pos for l in self._lexemes for p in l}):
            g.node(f"p{pos}", label=str(pos))
        for idx, lexeme in enumerate(self._lexemes):
            for p in lexeme:
                name = f"p{p.pos}"
                label = str(p) if show_weights else str(p.pos)
                g.edge(f"l{idx}", name, label=label)
        return g

    def render(self, view=True, filename: str='TsVector', format='pdf', tight=True):
        """
        Renders the tsvector to a file and optionally opens the file.
        :param view: If True, the rendered file will be opened.
        :param format: The file format for the Digraph. Typically 'pdf', 'png', or 'svg'.
        :param tight: If False, the rendered file will have whitespace margins around the graph.
        """
        import graphviz
        digraph = cast(graphviz.Digraph, self.view())
        digraph.format = format
        if tight:
            digraph.graph_attr['margin'] = '0'
        digraph.render(view=view, filename=filename, cleanup=True)

    def show(self):
        """Display the tsvector graph in Jupyter."""
        from IPython.display import display
        display(self.view())

    # ==================
    # Magic Methods
    # ==================

    def __getitem__(self, index: int) -> Lexeme:
        if not isinstance(index, int) or index < 0 or index >= len(self._lexemes):
            raise OutOfRange(f"Lexeme index out of range: {index!r}")
        return self._lexemes[index]

    def __len__(self):
        return len(self._lexemes)

    def __iter__(self):
        return iter(self._lexemes)

    def __contains__(self, text):
        return isinstance(text, str) and self.lexeme(text) is not None

    def __eq__(self, other):
        if not isinstance(other, TsVector):
            return NotImplemented
        return self._lexemes == other._lexemes

    def __hash__(self):
        return hash(tuple(self._lexemes))

    def __repr__(self):
        return f"TsVector.parse({self.to_text()!r})"

    def __str__(self):
        """The tsvector in PostgreSQL's format."""
        return self.to_text()


def parse(text: str) -> TsVector:
    """Parse a tsvector from PostgreSQL's text format."""
    return TsVector.parse(text)
