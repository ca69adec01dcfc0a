"""
Storage backends for PyColumn data.

Pure Python implementation using array.array for numeric kinds
and a plain list for bool and str. Both are mutable and resizable;
a column owns exactly one storage for its whole life.
"""

from __future__ import annotations
from array import array
from typing import Any, Protocol, Iterator, Sequence
from collections.abc import Iterable

from .errors import PyTableValueError
from .typing import DataType


class Storage(Protocol):
	"""Protocol for PyColumn storage backends."""

	def __len__(self) -> int:
		...

	def __getitem__(self, key: int | slice) -> Any:
		"""Element at index, or a new Storage for a slice."""
		...

	def __iter__(self) -> Iterator[Any]:
		...

	def append(self, value: Any) -> None:
		...

	def pop(self, i: int) -> Any:
		...

	def sort(self) -> None:
		"""In-place ascending sort."""
		...

	def take(self, indices: Sequence[int]) -> Storage:
		"""Return a new Storage gathering the given positions."""
		...

	def reorder(self, indices: Sequence[int]) -> None:
		"""Rewrite contents in place so that slot i holds old[indices[i]]."""
		...

	def copy(self) -> Storage:
		...

	def to_list(self) -> list:
		...


class ArrayStorage:
	"""
	Contiguous numeric storage using array.array.

	int columns are signed 64-bit ('q'), float columns are doubles ('d').
	"""

	__slots__ = ('_data',)

	# Map Python types to array.array typecodes
	_TYPECODE_MAP = {
		int: 'q',      # signed long long
		float: 'd',    # double
	}

	def __init__(self, data: array):
		self._data = data

	@classmethod
	def from_iterable(cls, values: Iterable[Any], dtype_kind: type) -> ArrayStorage:
		"""Create from Python iterable."""
		typecode = cls._TYPECODE_MAP.get(dtype_kind)
		if typecode is None:
			raise PyTableValueError(f"Cannot use ArrayStorage for {dtype_kind.__name__}")
		try:
			return cls(array(typecode, values))
		except OverflowError as e:
			raise PyTableValueError(f"Value out of range for 64-bit int column: {e}") from e

	@property
	def typecode(self) -> str:
		return self._data.typecode

	def __len__(self) -> int:
		return len(self._data)

	def __getitem__(self, key):
		if isinstance(key, slice):
			return ArrayStorage(self._data[key])
		return self._data[key]

	def __iter__(self) -> Iterator[Any]:
		return iter(self._data)

	def append(self, value: Any) -> None:
		try:
			self._data.append(value)
		except OverflowError as e:
			raise PyTableValueError(f"Value {value!r} out of range for 64-bit int column") from e

	def pop(self, i: int) -> Any:
		return self._data.pop(i)

	def sort(self) -> None:
		# array.array has no sort(); rebuild in place through slice assignment
		self._data[:] = array(self._data.typecode, sorted(self._data))

	def take(self, indices: Sequence[int]) -> ArrayStorage:
		data = self._data
		return ArrayStorage(array(data.typecode, [data[i] for i in indices]))

	def reorder(self, indices: Sequence[int]) -> None:
		data = self._data
		data[:] = array(data.typecode, [data[i] for i in indices])

	def copy(self) -> ArrayStorage:
		return ArrayStorage(array(self._data.typecode, self._data))

	def to_list(self) -> list:
		return self._data.tolist()


class ListStorage:
	"""
	Python object storage using list.

	For bool and str columns.
	"""

	__slots__ = ('_data',)

	def __init__(self, data: list):
		self._data = data

	@classmethod
	def from_iterable(cls, values: Iterable[Any]) -> ListStorage:
		return cls(list(values))

	def __len__(self) -> int:
		return len(self._data)

	def __getitem__(self, key):
		if isinstance(key, slice):
			return ListStorage(self._data[key])
		return self._data[key]

	def __iter__(self) -> Iterator[Any]:
		return iter(self._data)

	def append(self, value: Any) -> None:
		self._data.append(value)

	def pop(self, i: int) -> Any:
		return self._data.pop(i)

	def sort(self) -> None:
		self._data.sort()

	def take(self, indices: Sequence[int]) -> ListStorage:
		data = self._data
		return ListStorage([data[i] for i in indices])

	def reorder(self, indices: Sequence[int]) -> None:
		data = self._data
		data[:] = [data[i] for i in indices]

	def copy(self) -> ListStorage:
		return ListStorage(list(self._data))

	def to_list(self) -> list:
		return list(self._data)


def choose_storage(values: Iterable[Any], dtype: DataType) -> Storage:
	"""
	Choose appropriate storage backend based on dtype.

	Parameters
	----------
	values : Iterable[Any]
		Already validated data to store
	dtype : DataType
		Kind of the owning column

	Returns
	-------
	Storage
		Appropriate storage backend
	"""
	if dtype.kind in ArrayStorage._TYPECODE_MAP:
		return ArrayStorage.from_iterable(values, dtype.kind)
	return ListStorage.from_iterable(values)
