class InvalidArgument(ValueError):
    """Raised for arguments a tsvector value can never hold: a missing input
       string, position 0, or a weight outside A-D."""


class OutOfRange(InvalidArgument, IndexError):
    """Index outside [0, count). Also an IndexError, so iteration and
       slicing protocols behave."""


class FormatError(SyntaxError):
    """The text does not follow the tsvector grammar. The details tuple is
       ("", 1, column, text), with the 1-based column of the offending character."""
