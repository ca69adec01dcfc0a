"""
py-table: A Pythonic, zero-dependency column and table library

In-memory, column-oriented tables built from named, single-kind columns.
Every column holds exactly one of int, float, bool or str; the only
implicit widening is int -> float.

Main classes:
    - PyColumn: named, resizable, single-kind column
    - PyTable: ordered collection of equal-length PyColumns

Zero external dependencies - pure Python stdlib only.
"""

from .typing import DataType, INT, FLOAT, BOOL, STR
from .column import PyColumn
from .table import PyTable
from .options import get_options, set_options, option_context
from .errors import (
	PyTableError,
	PyTableKeyError,
	PyTableValueError,
	PyTableTypeError,
	PyTableIndexError,
	ColumnNotFoundError,
	DuplicateColumnError,
	InconsistentLengthError,
	InvalidTypeError,
	IndexOutOfBoundsError,
	EmptyColumnError,
)

__version__ = "0.1.0"
__all__ = [
	"PyColumn",
	"PyTable",
	"DataType",
	"INT",
	"FLOAT",
	"BOOL",
	"STR",
	"get_options",
	"set_options",
	"option_context",
	"PyTableError",
	"PyTableKeyError",
	"PyTableValueError",
	"PyTableTypeError",
	"PyTableIndexError",
	"ColumnNotFoundError",
	"DuplicateColumnError",
	"InconsistentLengthError",
	"InvalidTypeError",
	"IndexOutOfBoundsError",
	"EmptyColumnError",
]
