"""Basic PyColumn operations - creation, length, iteration, copy, edits"""
import pytest
from py_table import PyColumn
from py_table.typing import INT, FLOAT, BOOL, STR
from py_table.errors import EmptyColumnError, IndexOutOfBoundsError, InvalidTypeError, PyTableTypeError


class TestCreation:
    """Test basic column creation"""

    @pytest.mark.parametrize("initial,expected_len,expected_dtype", [
        ([1, 2, 3], 3, int),
        ([1.5, 2.5, 3.5], 3, float),
        (['a', 'b', 'c'], 3, str),
        ([True, False], 2, bool),
        ([1], 1, int),
    ])
    def test_creation_from_list(self, initial, expected_len, expected_dtype):
        c = PyColumn(initial)
        assert len(c) == expected_len
        assert c.schema().kind == expected_dtype
        assert list(c) == initial

    def test_creation_with_name(self):
        c = PyColumn([1, 2, 3], name='test_column')
        assert c.name == 'test_column'

    def test_int_promoted_to_float(self):
        c = PyColumn([1, 2, 3.5])
        assert c.schema() == FLOAT
        assert list(c) == [1.0, 2.0, 3.5]

    def test_explicit_dtype(self):
        c = PyColumn([1, 2], dtype=float)
        assert c.dtype == FLOAT
        assert all(isinstance(x, float) for x in c)

    def test_empty_needs_dtype(self):
        with pytest.raises(InvalidTypeError):
            PyColumn([])
        c = PyColumn([], dtype=STR)
        assert len(c) == 0
        assert c.empty

    def test_generator_input(self):
        c = PyColumn((x * 2 for x in range(3)), name='g')
        assert list(c) == [0, 2, 4]

    def test_string_input_rejected(self):
        with pytest.raises(PyTableTypeError):
            PyColumn("abc")

    def test_mixed_kinds_rejected(self):
        with pytest.raises(InvalidTypeError):
            PyColumn([1, "a"])

    def test_value_not_matching_dtype(self):
        with pytest.raises(InvalidTypeError):
            PyColumn([1.5], dtype=int)

    def test_none_rejected(self):
        with pytest.raises(InvalidTypeError):
            PyColumn([1, None])


class TestAccess:
    """Iteration and indexing"""

    def test_getitem_int(self):
        c = PyColumn([10, 20, 30])
        assert c[0] == 10
        assert c[-1] == 30

    def test_getitem_slice_returns_column(self):
        c = PyColumn(['a', 'b', 'c', 'd'], name='s')
        part = c[1:3]
        assert isinstance(part, PyColumn)
        assert list(part) == ['b', 'c']
        assert part.name == 's'
        assert part.schema() == STR

    def test_getitem_bad_key(self):
        c = PyColumn([1, 2])
        with pytest.raises(PyTableTypeError):
            c['a']

    def test_to_list(self):
        assert PyColumn([1.5, 2.5]).to_list() == [1.5, 2.5]

    def test_empty_property(self):
        assert not PyColumn([1]).empty


class TestCopy:
    """Test copy behavior"""

    def test_copy_basic(self):
        c1 = PyColumn([1, 2, 3], name='x')
        c2 = c1.copy()
        assert list(c1) == list(c2)
        assert c1 is not c2
        assert c2.name == 'x'

    def test_copy_mutation_independence(self):
        c1 = PyColumn([1, 2, 3])
        c2 = c1.copy()
        c2.erase(0)
        c2.append(4)
        assert list(c1) == [1, 2, 3]
        assert list(c2) == [2, 3, 4]

    def test_copy_with_new_values(self):
        c1 = PyColumn([1, 2, 3])
        c2 = c1.copy(new_values=[10, 20, 30])
        assert list(c2) == [10, 20, 30]
        assert c1.schema() == c2.schema()

    def test_copy_with_name(self):
        c1 = PyColumn([1, 2, 3], name='original')
        assert c1.copy(name='copy').name == 'copy'
        assert c1.copy(name=None).name is None

    def test_rename_returns_self(self):
        c = PyColumn([1])
        assert c.rename('r') is c
        assert c.name == 'r'


class TestAppend:

    def test_append(self):
        c = PyColumn(['a'])
        c.append('b')
        assert list(c) == ['a', 'b']

    def test_append_int_into_float(self):
        c = PyColumn([1.5])
        c.append(2)
        assert list(c) == [1.5, 2.0]

    def test_append_wrong_kind(self):
        c = PyColumn([1, 2])
        with pytest.raises(InvalidTypeError):
            c.append('3')
        assert list(c) == [1, 2]


class TestErase:

    def test_erase_middle(self):
        c = PyColumn([1, 2, 3])
        c.erase(1)
        assert list(c) == [1, 3]

    def test_erase_last_element(self):
        c = PyColumn([True])
        c.erase(0)
        assert c.empty

    @pytest.mark.parametrize("index", [0, 5, -1])
    def test_erase_empty_checked_before_bounds(self, index):
        c = PyColumn([], dtype=int)
        with pytest.raises(EmptyColumnError):
            c.erase(index)

    @pytest.mark.parametrize("index", [3, -1, 100])
    def test_erase_out_of_range(self, index):
        c = PyColumn([1, 2, 3])
        with pytest.raises(IndexOutOfBoundsError):
            c.erase(index)
        assert list(c) == [1, 2, 3]

    def test_empty_column_error_is_index_error(self):
        with pytest.raises(IndexError):
            PyColumn([], dtype=str).erase(0)


class TestTake:

    def test_take_order(self):
        c = PyColumn(['a', 'b', 'c'], name='t')
        taken = c.take([2, 0, 2])
        assert list(taken) == ['c', 'a', 'c']
        assert taken.name == 't'

    def test_take_out_of_range(self):
        with pytest.raises(IndexOutOfBoundsError):
            PyColumn([1, 2]).take([0, 2])

    @pytest.mark.parametrize("indices", [[1.0], [True], ["0"]])
    def test_take_non_integer_positions(self, indices):
        with pytest.raises(PyTableTypeError):
            PyColumn([1, 2]).take(indices)


class TestStatistics:

    def test_mean(self):
        assert PyColumn([1, 2, 3, 4]).mean() == 2.5

    def test_variance_sample(self):
        assert PyColumn([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]).variance() == pytest.approx(32 / 7)

    def test_variance_population(self):
        assert PyColumn([2, 4, 4, 4, 5, 5, 7, 9]).variance(population=True) == pytest.approx(4.0)

    def test_variance_too_short(self):
        assert PyColumn([1]).variance() is None
        assert PyColumn([], dtype=float).mean() is None

    @pytest.mark.parametrize("values", [['a', 'b'], [True, False]])
    def test_non_numeric(self, values):
        with pytest.raises(InvalidTypeError):
            PyColumn(values).mean()
        with pytest.raises(InvalidTypeError):
            PyColumn(values).variance()
