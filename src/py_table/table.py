import warnings

from .column import PyColumn
from .display import _dump_table
from .display import _printr
from .errors import ColumnNotFoundError
from .errors import DuplicateColumnError
from .errors import InconsistentLengthError
from .errors import IndexOutOfBoundsError
from .errors import PyTableTypeError
from .errors import PyTableValueError
from .options import get_options
from .typing import validate_scalar


def _system_name(idx):
	return f'col{idx}_'


class PyTable():
	"""
	Multiple named columns of the same length.

	The table owns its columns: columns passed in are copied, and
	column() hands back a copy. _column_map (name -> position) is kept
	in step with the column list by every operation.
	"""
	_length = 0

	def __init__(self, initial=()):
		"""
		Build a table from a sequence of PyColumns or a dict {name: values}.

		Dict values may be lists or PyColumns. An empty list has no kind to
		infer, so zero-row columns are given as PyColumn([], dtype=...).
		"""
		# Handle dict initialization {name: values, ...}
		if isinstance(initial, dict):
			initial = [PyColumn(values, name=col_name) for col_name, values in initial.items()]

		initial = list(initial)
		for col in initial:
			if not isinstance(col, PyColumn):
				raise PyTableTypeError(f"PyTable columns must be PyColumn, not {type(col).__name__}")

		if initial:
			length = len(initial[0])
			for col in initial[1:]:
				if len(col) != length:
					raise InconsistentLengthError(
						f"Column '{col.name}' has length {len(col)}, expected {length}"
					)
		else:
			length = 0

		# Tables receive snapshots of columns, preventing aliasing
		self._underlying = [col.copy() for col in initial]
		for idx, col in enumerate(self._underlying):
			if col._name is None:
				col._name = _system_name(idx)
		self._length = length
		self._column_map = self._build_column_map()

	@classmethod
	def _from_columns(cls, columns, length, column_map=None):
		"""Adopt freshly built columns without copying them again."""
		instance = cls.__new__(cls)
		instance._underlying = list(columns)
		instance._length = length if instance._underlying else 0
		if column_map is None:
			instance._column_map = instance._build_column_map()
		else:
			instance._column_map = column_map
		return instance

	def _build_column_map(self):
		"""Build mapping from column names to column positions."""
		column_map = {}
		for idx, col in enumerate(self._underlying):
			if col._name in column_map:
				raise DuplicateColumnError(f"Duplicate column name '{col._name}'")
			column_map[col._name] = idx
		return column_map

	def _index_of(self, name):
		idx = self._column_map.get(name)
		if idx is None:
			raise ColumnNotFoundError(name)
		return idx

	@staticmethod
	def _check_position_type(position):
		if not isinstance(position, int) or isinstance(position, bool):
			raise PyTableTypeError(f"Row positions must be integers, not {type(position).__name__}")

	def _check_row_index(self, row_index):
		if not isinstance(row_index, int) or isinstance(row_index, bool) or not (0 <= row_index < self._length):
			raise IndexOutOfBoundsError(
				f"Row index {row_index!r} out of range for table with {self._length} rows"
			)

	#-----------------------------------------------------
	# Inspection
	#-----------------------------------------------------

	@property
	def shape(self):
		"""(row_count, col_count)"""
		return (self._length, len(self._underlying))

	def __len__(self):
		return self._length

	def column_names(self):
		return [col._name for col in self._underlying]

	def dtypes(self):
		return [col.schema() for col in self._underlying]

	def cols(self):
		"""
		The table's own columns, in order.

		These are shared, not copied: treat them as read-only and use
		column() for a copy you may modify.
		"""
		return tuple(self._underlying)

	def __contains__(self, name):
		return name in self._column_map

	def column(self, name):
		"""Return a copy of the named column."""
		return self._underlying[self._index_of(name)].copy()

	def __getitem__(self, key):
		"""
		t['a']          -> copy of column 'a'
		t[['a', 'b']]   -> new table with columns a, b
		t[3]            -> row 3 as a tuple
		"""
		if isinstance(key, str):
			return self.column(key)
		if isinstance(key, (list, tuple)) and all(isinstance(k, str) for k in key):
			return self.select_columns(key)
		if isinstance(key, int) and not isinstance(key, bool):
			return self.row(key)
		raise PyTableTypeError(f"Table keys must be a column name, a list of names or a row index, not {type(key).__name__}")

	def row(self, row_index):
		self._check_row_index(row_index)
		return tuple(col[row_index] for col in self._underlying)

	def rows(self):
		"""Iterate over rows as tuples, in column order."""
		return zip(*self._underlying)

	def __iter__(self):
		return self.rows()

	def __repr__(self):
		return _printr(self)

	def dump(self):
		"""Tab-separated grid of the whole table (header, then index + values per row)."""
		return _dump_table(self)

	#-----------------------------------------------------
	# Column edits
	#-----------------------------------------------------

	def add_column(self, col):
		"""Append a copy of `col` (modifies in place, returns self for chaining)"""
		if not isinstance(col, PyColumn):
			raise PyTableTypeError(f"add_column expects a PyColumn, not {type(col).__name__}")
		if self._underlying and len(col) != self._length:
			raise InconsistentLengthError(
				f"Column '{col.name}' has length {len(col)}, table has {self._length} rows"
			)
		name = col.name if col.name is not None else _system_name(len(self._underlying))
		if name in self._column_map:
			raise DuplicateColumnError(f"Column '{name}' already exists")

		if not self._underlying:
			self._length = len(col)
		self._column_map[name] = len(self._underlying)
		self._underlying.append(col.copy(name=name))
		return self

	def drop_column(self, name):
		"""Remove a column (modifies in place, returns self for chaining)"""
		idx = self._index_of(name)
		del self._underlying[idx]
		del self._column_map[name]
		for other, pos in self._column_map.items():
			if pos > idx:
				self._column_map[other] = pos - 1
		if not self._underlying:
			self._length = 0
		return self

	def rename_column(self, old_name, new_name):
		"""Rename a column (modifies in place, returns self for chaining)"""
		idx = self._index_of(old_name)
		if new_name == old_name:
			return self
		if new_name in self._column_map:
			raise DuplicateColumnError(f"Column '{new_name}' already exists")
		self._underlying[idx]._name = new_name
		del self._column_map[old_name]
		self._column_map[new_name] = idx
		return self

	def select_columns(self, names):
		"""New table holding copies of the named columns, in the given order."""
		columns = [self._underlying[self._index_of(name)].copy() for name in names]
		return PyTable._from_columns(columns, self._length)

	#-----------------------------------------------------
	# Row edits
	#-----------------------------------------------------

	def drop_row(self, row_index):
		"""Remove one row from every column (modifies in place, returns self for chaining)"""
		self._check_row_index(row_index)
		for col in self._underlying:
			col.erase(row_index)
		self._length -= 1
		return self

	def add_row(self, values):
		"""
		Append one value to every column.

		The whole row is validated before any column is touched, so a
		failure leaves the table unchanged.
		"""
		values = list(values)
		if not self._underlying:
			raise PyTableValueError("Cannot add a row to a table without columns")
		if len(values) != len(self._underlying):
			raise InconsistentLengthError(
				f"Row has {len(values)} values, table has {len(self._underlying)} columns"
			)
		validated = [validate_scalar(v, col.schema()) for v, col in zip(values, self._underlying)]

		appended = []
		try:
			for col, v in zip(self._underlying, validated):
				col._storage.append(v)
				appended.append(col)
		except PyTableValueError:
			# int overflow in a later column; undo the earlier appends
			for col in appended:
				col._storage.pop(-1)
			raise
		self._length += 1
		return self

	#-----------------------------------------------------
	# Projection
	#-----------------------------------------------------

	def select_rows(self, row_range=None, indices=None):
		"""
		New table holding a subset of rows.

		Parameters
		----------
		row_range : (begin, end), optional
			Half-open range of rows; requires 0 <= begin <= end <= len(self)
		indices : Iterable[int], optional
			Row positions. They are sorted ascending first, so the result
			follows table order, not the order given.

		If both are given, row_range wins. If neither is given, the empty
		table is returned (or PyTableValueError, see options.empty_selection).
		"""
		if row_range is not None:
			if indices is not None:
				warnings.warn("select_rows() got both row_range and indices; indices are ignored", stacklevel=2)
			begin, end = row_range
			self._check_position_type(begin)
			self._check_position_type(end)
			if not (0 <= begin <= end <= self._length):
				raise IndexOutOfBoundsError(
					f"Row range ({begin}, {end}) out of bounds for table with {self._length} rows"
				)
			columns = [col[begin:end] for col in self._underlying]
			return PyTable._from_columns(columns, end - begin, dict(self._column_map))

		if indices is not None:
			indices = list(indices)
			for i in indices:
				self._check_position_type(i)
			indices = sorted(indices)
			if indices and (indices[0] < 0 or indices[-1] >= self._length):
				raise IndexOutOfBoundsError(
					f"Row indices must lie in [0, {self._length}), got min {indices[0]} and max {indices[-1]}"
				)
			columns = [col.take(indices) for col in self._underlying]
			return PyTable._from_columns(columns, len(indices), dict(self._column_map))

		if get_options().empty_selection == "raise":
			raise PyTableValueError("select_rows() needs row_range or indices")
		return PyTable()

	def filter(self, column_name, predicate):
		"""
		Rows whose value in `column_name` satisfies `predicate`.

		The predicate is called with each value of the column.
		"""
		idx = self._column_map.get(column_name)
		if idx is None:
			if get_options().missing_column == "empty":
				warnings.warn(
					f"Column '{column_name}' not found; filter() returns an empty table",
					stacklevel=2
				)
				return PyTable()
			raise ColumnNotFoundError(column_name)

		keep = [i for i, v in enumerate(self._underlying[idx]) if predicate(v)]
		return self.select_rows(indices=keep)

	#-----------------------------------------------------
	# Sorting
	#-----------------------------------------------------

	def sort(self, column_name, decrease=False):
		"""
		Sort every column by the order of `column_name` (in place, returns self).

		The permutation is computed once and applied to all columns, so
		rows stay intact. decrease=True reverses the ascending permutation.
		"""
		idx = self._index_of(column_name)
		indices = self._underlying[idx].get_argsort_indices(decrease)
		for col in self._underlying:
			col.argsort_indices(indices)
		return self
