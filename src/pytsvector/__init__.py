from pytsvector.errors import InvalidArgument, OutOfRange, FormatError
from pytsvector.position import Position, Weight
from pytsvector.lexeme import Lexeme, unique_positions
from pytsvector.tsvector import TsVector, parse

__author__     = "pytsvector developers"
__copyright__  = "Copyright 2026"
__credits__    = ["pytsvector developers"]
__license__    = "Apache"
__version__    = "1.0"
__maintainer__ = "pytsvector developers"
__status__     = "Prototype"
