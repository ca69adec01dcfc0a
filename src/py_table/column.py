import operator

from .errors import EmptyColumnError
from .errors import IndexOutOfBoundsError
from .errors import InconsistentLengthError
from .errors import InvalidTypeError
from .errors import PyTableTypeError
from .errors import PyTableValueError
from .display import _printr
from .storage import choose_storage
from .typing import DataType
from .typing import as_dtype
from .typing import infer_dtype
from .typing import infer_kind
from .typing import promote
from .typing import validate_scalar

from typing import Any
from typing import List


# ============================================================
# Arithmetic dispatch
# ============================================================

def _truncating_div(a, b):
	"""Integer division rounding toward zero; exact for any int size."""
	quotient = abs(a) // abs(b)
	return quotient if (a < 0) == (b < 0) else -quotient


# result kind -> operator symbol -> function
# int '/' truncates toward zero
_ARITHMETIC = {
	int: {
		'+': operator.add,
		'-': operator.sub,
		'*': operator.mul,
		'/': _truncating_div,
	},
	float: {
		'+': operator.add,
		'-': operator.sub,
		'*': operator.mul,
		'/': operator.truediv,
	},
	str: {
		'+': operator.add,
	},
}


def _promoted(values, from_dtype, to_dtype):
	"""values converted to to_dtype (only int -> float ever converts)"""
	if from_dtype == to_dtype:
		return values
	return (float(x) for x in values)


# ============================================================
# Main backend
# ============================================================

class PyColumn():
	""" Named, single-kind, resizable column of scalars """
	_dtype = None    # DataType instance, fixed at construction
	_storage = None
	_name = None

	def __init__(self, initial=(), dtype=None, name=None):
		"""
		Build a column from an iterable of int, float, bool or str values.

		Parameters
		----------
		initial : Iterable
			Values of a single kind (ints may be mixed into floats)
		dtype : DataType or type, optional
			Kind of the column. Required when `initial` is empty.
		name : str, optional
			Column name
		"""
		if isinstance(initial, (str, bytes)):
			raise PyTableTypeError(
				f"PyColumn expects an iterable of scalars, not {type(initial).__name__}"
			)
		if isinstance(initial, PyColumn):
			if dtype is None:
				dtype = initial._dtype
			initial = initial.to_list()
		elif not isinstance(initial, (list, tuple)):
			# materialize generators once
			initial = tuple(initial)

		dtype = as_dtype(dtype) if dtype is not None else infer_dtype(initial)
		values = [validate_scalar(v, dtype) for v in initial]

		self._dtype = dtype
		self._storage = choose_storage(values, dtype)
		self._name = name

	@classmethod
	def _from_storage(cls, storage, dtype, name=None):
		"""Wrap an existing storage without re-validating it."""
		instance = cls.__new__(cls)
		instance._dtype = dtype
		instance._storage = storage
		instance._name = name
		return instance

	def schema(self):
		"""Get the DataType schema of this column."""
		return self._dtype

	@property
	def dtype(self):
		return self._dtype

	@property
	def name(self):
		return self._name

	def rename(self, new_name):
		"""Rename this column (returns self for chaining)"""
		self._name = new_name
		return self

	def copy(self, new_values=None, name=...):
		# Use sentinel value (...) to distinguish between name=None (clear) and not passing name (preserve)
		use_name = self._name if name is ... else name
		if new_values is None:
			return PyColumn._from_storage(self._storage.copy(), self._dtype, use_name)
		return PyColumn(new_values, dtype=self._dtype, name=use_name)

	def __repr__(self):
		return _printr(self)

	def __iter__(self):
		""" iterate over the underlying storage """
		return iter(self._storage)

	def __len__(self):
		""" length of the underlying storage """
		return len(self._storage)

	@property
	def empty(self):
		return len(self._storage) == 0

	def __getitem__(self, key):
		""" Int returns a value; slice returns a new PyColumn with the same name """
		if isinstance(key, slice):
			return PyColumn._from_storage(self._storage[key], self._dtype, self._name)
		if isinstance(key, int) and not isinstance(key, bool):
			return self._storage[key]
		raise PyTableTypeError(f'Column indices must be integers or slices, not {type(key).__name__}')

	def to_list(self) -> List[Any]:
		return self._storage.to_list()

	#-----------------------------------------------------
	# Structural edits
	#-----------------------------------------------------

	def append(self, value):
		"""Validate and append one scalar."""
		self._storage.append(validate_scalar(value, self._dtype))

	def erase(self, index):
		"""
		Remove the element at `index`.

		An empty column raises EmptyColumnError whatever the index is.
		"""
		n = len(self._storage)
		if n == 0:
			raise EmptyColumnError(f"Cannot erase from empty column '{self._name}'")
		if not isinstance(index, int) or isinstance(index, bool) or not (0 <= index < n):
			raise IndexOutOfBoundsError(
				f"Index {index!r} out of range for column length {n}"
			)
		self._storage.pop(index)

	def take(self, indices):
		"""New column holding the elements at `indices`, in that order."""
		n = len(self._storage)
		indices = list(indices)
		for i in indices:
			if not isinstance(i, int) or isinstance(i, bool):
				raise PyTableTypeError(f"Row positions must be integers, not {type(i).__name__}")
			if not (0 <= i < n):
				raise IndexOutOfBoundsError(f"Index {i} out of range for column length {n}")
		return PyColumn._from_storage(self._storage.take(indices), self._dtype, self._name)

	#-----------------------------------------------------
	# Sorting
	#-----------------------------------------------------

	def sort(self):
		"""In-place ascending sort (False < True for bool, lexicographic for str)."""
		self._storage.sort()

	def get_argsort_indices(self, decrease=False):
		"""
		Permutation that sorts this column ascending.

		Ties keep their original relative order. With decrease=True the
		ascending permutation is returned reversed, so tied values come
		out in reverse original order; this is not a stable descending sort.
		"""
		storage = self._storage
		indices = sorted(range(len(storage)), key=storage.__getitem__)
		if decrease:
			indices.reverse()
		return indices

	def argsort_indices(self, indices):
		"""Reorder in place so that position i holds the old element indices[i]."""
		indices = list(indices)
		n = len(self._storage)
		if len(indices) != n:
			raise InconsistentLengthError(
				f"Permutation length {len(indices)} does not match column length {n}"
			)
		if set(indices) != set(range(n)):
			raise PyTableValueError(f"Indices are not a permutation of 0..{n}")
		self._storage.reorder(indices)

	def argsort(self, decrease=False):
		"""Sort in place by argsort and return the permutation that was applied."""
		indices = self.get_argsort_indices(decrease)
		self._storage.reorder(indices)
		return indices

	#-----------------------------------------------------
	# Math operations
	#-----------------------------------------------------

	def _elementwise_operation(self, other, op_symbol: str, reflected=False):
		"""Apply op elementwise against a column of equal length or a broadcast scalar."""
		if isinstance(other, PyColumn):
			if len(self) != len(other):
				raise InconsistentLengthError(
					f"Cannot apply '{op_symbol}' to columns of length {len(self)} and {len(other)}"
				)
			other_dtype = other._dtype
		elif isinstance(other, (int, float, str)):
			other_dtype = DataType(infer_kind(other))
		else:
			# let Python try the reflected method of `other`
			return NotImplemented

		result_dtype = promote(self._dtype, other_dtype)
		op_func = _ARITHMETIC[result_dtype.kind].get(op_symbol)
		if op_func is None:
			raise InvalidTypeError(
				f"Unsupported operand type(s) for '{op_symbol}': "
				f"'{self._dtype.name}' and '{other_dtype.name}'"
			)

		left = _promoted(self._storage, self._dtype, result_dtype)
		if isinstance(other, PyColumn):
			right = _promoted(other._storage, other_dtype, result_dtype)
			pairs = zip(left, right, strict=True)
		else:
			scalar = other if other_dtype == result_dtype else float(other)
			pairs = ((x, scalar) for x in left)

		if reflected:
			result_values = [op_func(y, x) for x, y in pairs]
		else:
			result_values = [op_func(x, y) for x, y in pairs]
		return PyColumn._from_storage(choose_storage(result_values, result_dtype), result_dtype)

	def __add__(self, other):
		return self._elementwise_operation(other, '+')

	def __sub__(self, other):
		return self._elementwise_operation(other, '-')

	def __mul__(self, other):
		return self._elementwise_operation(other, '*')

	def __truediv__(self, other):
		return self._elementwise_operation(other, '/')

	def __radd__(self, other):
		return self._elementwise_operation(other, '+', reflected=True)

	def __rsub__(self, other):
		return self._elementwise_operation(other, '-', reflected=True)

	def __rmul__(self, other):
		return self._elementwise_operation(other, '*', reflected=True)

	def __rtruediv__(self, other):
		return self._elementwise_operation(other, '/', reflected=True)

	#-----------------------------------------------------
	# Numeric summaries
	#-----------------------------------------------------

	def _require_numeric(self, what):
		if not self._dtype.is_numeric:
			raise InvalidTypeError(f"{what}() requires an int or float column, not {self._dtype.name}")

	def mean(self):
		self._require_numeric('mean')
		n = len(self._storage)
		return sum(self._storage) / n if n else None

	def variance(self, population=False):
		"""Sample variance (population variance with population=True); None if undefined."""
		self._require_numeric('variance')
		n = len(self._storage)
		denominator = n - 1 + population
		if n == 0 or denominator <= 0:
			return None
		m = sum(self._storage) / n
		return sum((x - m) * (x - m) for x in self._storage) / denominator
