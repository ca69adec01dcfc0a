"""
DataType system for PyColumn / PyTable.

Pure metadata design:
  - DataType names one of the four scalar kinds a column may hold
  - A column's DataType is fixed for its lifetime
  - Promotion is functional (immutable DataType instances)
  - The only implicit widening is int -> float
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Type

from .errors import InvalidTypeError


SCALAR_KINDS = (int, float, bool, str)


@dataclass(frozen=True)
class DataType:
    """
    Describes the scalar kind of a PyColumn.

    Attributes
    ----------
    kind : Type
        One of int, float, bool, str

    Notes
    -----
    - DataType holds zero instance data
    - Promotion never mutates — always returns a DataType
    - Nulls are not representable; every slot holds a value of `kind`

    Examples
    --------
    >>> DataType(int)
    <int>
    >>> promote(DataType(int), DataType(float))
    <float>
    """

    kind: Type[Any]

    def __post_init__(self):
        if self.kind not in SCALAR_KINDS:
            name = getattr(self.kind, "__name__", repr(self.kind))
            raise InvalidTypeError(
                f"Unsupported column kind '{name}'; expected one of int, float, bool, str"
            )

    def __repr__(self):
        return f"<{self.kind.__name__}>"

    @property
    def name(self) -> str:
        return self.kind.__name__

    @property
    def is_numeric(self) -> bool:
        """True if kind is int or float. bool does not count."""
        return self.kind in (int, float)


INT = DataType(int)
FLOAT = DataType(float)
BOOL = DataType(bool)
STR = DataType(str)


def as_dtype(dtype: Any) -> DataType:
    """Accept a DataType or a bare Python type."""
    if isinstance(dtype, DataType):
        return dtype
    return DataType(dtype)


def infer_kind(value: Any) -> Type:
    """
    Infer the scalar kind of a single value.

    Raises InvalidTypeError for None and for anything that is not one of
    the four scalar kinds.
    """
    # Check bool BEFORE int (bool is subclass of int)
    if isinstance(value, bool):
        return bool
    if isinstance(value, int):
        return int
    if isinstance(value, float):
        return float
    if isinstance(value, str):
        return str
    if value is None:
        raise InvalidTypeError("Missing values (None) are not supported")
    raise InvalidTypeError(f"Unsupported scalar type '{type(value).__name__}'")


def infer_dtype(values: Iterable[Any]) -> DataType:
    """
    Infer a DataType from an iterable of Python scalars.

    Parameters
    ----------
    values : Iterable[Any]
        Python scalars to analyze

    Returns
    -------
    DataType
        Inferred dtype

    Raises
    ------
    InvalidTypeError
        If the values are empty, or mix kinds other than int and float

    Examples
    --------
    >>> infer_dtype([1, 2, 3])
    <int>
    >>> infer_dtype([1, 2.5, 3])
    <float>
    """
    kind: Optional[Type] = None

    for v in values:
        k = infer_kind(v)
        if kind is None or k is kind:
            kind = k
        elif {kind, k} == {int, float}:
            kind = float
        else:
            raise InvalidTypeError(
                f"Cannot mix {kind.__name__} and {k.__name__} values in one column"
            )

    if kind is None:
        raise InvalidTypeError("Cannot infer the kind of an empty column; pass dtype")

    return DataType(kind)


def validate_scalar(value: Any, dtype: DataType) -> Any:
    """
    Validate (and possibly coerce) a scalar before writing into a column.

    Parameters
    ----------
    value : Any
        Scalar to validate
    dtype : DataType
        Target dtype

    Returns
    -------
    Any
        Validated/coerced scalar

    Raises
    ------
    InvalidTypeError
        If value is incompatible with dtype
    """
    vtype = type(value)

    # Exact match
    if vtype is dtype.kind:
        return value

    # The one numeric coercion
    if dtype.kind is float and vtype is int:
        return float(value)

    raise InvalidTypeError(
        f"Incompatible value {value!r} for column<{dtype.name}>"
    )


def promote(left: DataType, right: DataType) -> DataType:
    """
    Result kind of an arithmetic operation between two kinds.

    int ⊕ int -> int, float ⊕ float -> float, int ⊕ float -> float,
    str + str -> str. bool takes part in no arithmetic.
    """
    if left.kind is bool or right.kind is bool:
        raise InvalidTypeError(
            f"Arithmetic is not defined for {left.name} and {right.name}"
        )
    if left.kind is right.kind:
        return left
    if left.is_numeric and right.is_numeric:
        return FLOAT
    raise InvalidTypeError(
        f"Arithmetic is not defined for {left.name} and {right.name}"
    )
