"""PyTable creation, shape and column access"""
import pytest
from py_table import PyColumn, PyTable
from py_table.typing import INT, FLOAT, STR
from py_table.errors import (
	ColumnNotFoundError,
	DuplicateColumnError,
	InconsistentLengthError,
	IndexOutOfBoundsError,
	InvalidTypeError,
	PyTableTypeError,
)


def make_table():
	return PyTable([
		PyColumn([1, 2, 3], name='a'),
		PyColumn([1.5, 2.5, 3.5], name='b'),
		PyColumn(['x', 'y', 'z'], name='c'),
	])


class TestTableCreation:
	"""Test PyTable creation"""

	def test_create_from_columns(self):
		t = make_table()
		assert t.shape == (3, 3)
		assert len(t) == 3
		assert t.column_names() == ['a', 'b', 'c']
		assert t.dtypes() == [INT, FLOAT, STR]

	def test_create_from_dict(self):
		t = PyTable({'a': [1, 2], 'b': ['p', 'q']})
		assert t.shape == (2, 2)
		assert list(t['b']) == ['p', 'q']

	def test_name_index_matches_positions(self):
		t = make_table()
		for pos, name in enumerate(t.column_names()):
			assert t._column_map[name] == pos
		assert len(t._column_map) == t.shape[1]

	def test_unequal_lengths_raise(self):
		with pytest.raises(InconsistentLengthError):
			PyTable([PyColumn([1, 2, 3], name='a'), PyColumn([4, 5], name='b')])

	def test_duplicate_names_raise(self):
		with pytest.raises(DuplicateColumnError):
			PyTable([PyColumn([1], name='a'), PyColumn([2], name='a')])

	def test_unnamed_columns_get_system_names(self):
		t = PyTable([PyColumn([1]), PyColumn([2], name='b'), PyColumn([3])])
		assert t.column_names() == ['col0_', 'b', 'col2_']

	def test_non_column_rejected(self):
		with pytest.raises(PyTableTypeError):
			PyTable([[1, 2, 3]])

	def test_empty_table(self):
		t = PyTable()
		assert t.shape == (0, 0)
		assert t.column_names() == []
		assert list(t.rows()) == []

	def test_zero_row_columns(self):
		t = PyTable([PyColumn([], dtype=int, name='a')])
		assert t.shape == (0, 1)

	def test_zero_row_columns_from_dict(self):
		t = PyTable({'a': PyColumn([], dtype=int), 'b': PyColumn([], dtype=str)})
		assert t.shape == (0, 2)
		assert t.column_names() == ['a', 'b']
		assert t.dtypes() == [INT, STR]
		t.add_row([1, 'x'])
		assert t.row(0) == (1, 'x')

	def test_empty_list_in_dict_needs_dtype(self):
		with pytest.raises(InvalidTypeError):
			PyTable({'a': []})

	def test_constructor_copies_columns(self):
		col = PyColumn([1, 2, 3], name='a')
		t = PyTable([col])
		col.erase(0)
		col.rename('changed')
		assert t.shape == (3, 1)
		assert list(t['a']) == [1, 2, 3]


class TestColumnAccess:

	def test_column_returns_copy(self):
		t = make_table()
		col = t.column('a')
		col.erase(0)
		col.rename('zzz')
		assert list(t.column('a')) == [1, 2, 3]
		assert t.column_names() == ['a', 'b', 'c']

	def test_missing_column(self):
		t = make_table()
		with pytest.raises(ColumnNotFoundError):
			t.column('missing')

	def test_missing_column_is_key_error(self):
		with pytest.raises(KeyError):
			make_table()['missing']

	def test_getitem_list_selects_columns(self):
		sub = make_table()[['c', 'a']]
		assert sub.column_names() == ['c', 'a']

	def test_getitem_int_is_row(self):
		assert make_table()[1] == (2, 2.5, 'y')

	def test_contains(self):
		t = make_table()
		assert 'a' in t
		assert 'q' not in t


class TestRows:

	def test_row(self):
		assert make_table().row(0) == (1, 1.5, 'x')

	@pytest.mark.parametrize("index", [-1, 3, 10])
	def test_row_out_of_bounds(self, index):
		with pytest.raises(IndexOutOfBoundsError):
			make_table().row(index)

	def test_rows_iterates_records(self):
		assert list(make_table().rows()) == [(1, 1.5, 'x'), (2, 2.5, 'y'), (3, 3.5, 'z')]

	def test_iter_is_rows(self):
		assert list(make_table()) == list(make_table().rows())
