"""Runtime options for PyTable fallbacks.

Two behaviours can either fail loudly or fall back to the empty table:

  missing_column   PyTable.filter() on a column that does not exist
                   "raise" (default) -> ColumnNotFoundError
                   "empty"           -> empty table + UserWarning

  empty_selection  PyTable.select_rows() with neither a range nor indices
                   "empty" (default) -> empty table
                   "raise"           -> PyTableValueError
"""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace

from .errors import PyTableValueError


_CHOICES = {
	"missing_column": ("raise", "empty"),
	"empty_selection": ("empty", "raise"),
}


@dataclass(frozen=True)
class Options:
	missing_column: str = "raise"
	empty_selection: str = "empty"

	def __post_init__(self):
		for f in fields(self):
			value = getattr(self, f.name)
			if value not in _CHOICES[f.name]:
				raise PyTableValueError(
					f"Invalid value {value!r} for option '{f.name}'; "
					f"expected one of {', '.join(map(repr, _CHOICES[f.name]))}"
				)


_OPTIONS = Options()


def get_options() -> Options:
	"""Return the current options."""
	return _OPTIONS


def set_options(**changes) -> Options:
	"""Replace the named options. Returns the previous Options."""
	global _OPTIONS
	unknown = set(changes) - set(_CHOICES)
	if unknown:
		raise PyTableValueError(f"Unknown option(s): {', '.join(sorted(unknown))}")
	previous = _OPTIONS
	_OPTIONS = replace(previous, **changes)
	return previous


@contextmanager
def option_context(**changes):
	"""Temporarily change options inside a with-block."""
	global _OPTIONS
	previous = set_options(**changes)
	try:
		yield _OPTIONS
	finally:
		_OPTIONS = previous
