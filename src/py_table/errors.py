class PyTableError(Exception):
    """Base exception for py-table library."""
    pass


class PyTableKeyError(PyTableError, KeyError):
    """Raised when a column/key is missing."""
    pass


class PyTableTypeError(PyTableError, TypeError):
    """Raised for invalid types in API calls."""
    pass


class PyTableValueError(PyTableError, ValueError):
    """Raised for invalid values or mismatched lengths."""
    pass


class PyTableIndexError(PyTableError, IndexError):
    """Raised for invalid indexing operations."""
    pass


class ColumnNotFoundError(PyTableKeyError):
    """Raised when a column name is not present in a table."""

    def __init__(self, name, context="PyTable"):
        self.name = name
        super().__init__(f"Column '{name}' not found in {context}")

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return self.args[0]


class DuplicateColumnError(PyTableValueError):
    """Raised when a column name is already taken."""
    pass


class InconsistentLengthError(PyTableValueError):
    """Raised when column lengths (or a row width) do not line up."""
    pass


class InvalidTypeError(PyTableTypeError):
    """Raised when a scalar kind does not match, or an operation is not defined for it."""
    pass


class IndexOutOfBoundsError(PyTableIndexError):
    """Raised for row positions or ranges outside the table."""
    pass


class EmptyColumnError(PyTableIndexError):
    """Raised when removing an element from a zero-length column."""
    pass
