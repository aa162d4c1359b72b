"""Groupings of scalar types, and the capabilities vector components may need"""

from typing import *
import numpy as np

__author__ = "Vince Reuter"

__all__ = [
    "FloatLike", 
    "IntegerLike", 
    "SupportsAddSelf", 
    "SupportsMul", 
    "default_scalar",
    ]

_T = TypeVar("_T")
_T_contra = TypeVar("_T_contra", contravariant=True)
_X_co = TypeVar("_X_co", covariant=True)


FloatLike = Union[float, np.float16, np.float32, np.float64]
IntegerLike = Union[int, np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64]


class SupportsAddSelf(Protocol):
    """Scalar whose addition doesn't change its type (e.g., units are preserved)"""
    def __add__(self: _T, other: _T, /) -> _T: ...


class SupportsMul(Protocol[_T_contra, _X_co]):
    """Scalar which may be multiplied by something of another type, possibly yielding a third type (e.g., length * time)"""
    def __mul__(self, other: _T_contra, /) -> _X_co: ...


def default_scalar(scalar_type: Callable[[], _T]) -> _T:
    """
    Get the neutral/default value of the given scalar type, by calling it with no arguments.

    Parameters
    ----------
    scalar_type : Callable[[], T]
        A type (or other factory) which builds its neutral value when called without arguments, 
        e.g. int, float, fractions.Fraction, decimal.Decimal, numpy.float64

    Returns
    -------
    T
        The neutral value for the given type, e.g. 0 or 0.0

    Raises
    ------
    TypeError
        If the given type cannot produce a value without arguments
    """
    if not callable(scalar_type):
        raise TypeError(f"Scalar type for default value isn't callable: {type(scalar_type).__name__}")
    try:
        return scalar_type()
    except TypeError as e:
        raise TypeError(f"Scalar type {getattr(scalar_type, '__name__', scalar_type)} has no default value: {e}") from e
