"""The three-dimensional vector value type, generic in the type of its components

The components may be plain numbers, numpy scalars, or unit-carrying quantities.
Operations which don't change units (addition, subtraction, negation) combine vectors
with vectors, while operations which may change units (scalar multiplication and division,
dot and cross products, norm-squared) produce whatever type the underlying scalar operation does.
"""

import copy
import logging
import numbers
from typing import Any, Callable, Generic, Iterator, Mapping, Sequence, TypeVar

import attrs
from expression import Result

from vector3d.display import format_vector
from vector3d.exceptions import AxisIndexError, ScalarTypeMismatchError
from vector3d.scalars import IntegerLike, SupportsMul, default_scalar

__author__ = "Vince Reuter"

__all__ = ["AXIS_NAMES", "Vector3d"]

_S = TypeVar("_S")
_T = TypeVar("_T")
_X = TypeVar("_X")

AXIS_NAMES = ("x", "y", "z")

logger = logging.getLogger(__name__)


def _apply(operation: str, axis: str, op: Callable[[Any, Any], _X], left: Any, right: Any) -> _X:
    try:
        return op(left, right)
    except TypeError as e:
        raise ScalarTypeMismatchError(operation=operation, axis=axis, left=left, right=right, cause=e) from e


def _apply_unary(operation: str, axis: str, op: Callable[[Any], _X], operand: Any) -> _X:
    try:
        return op(operand)
    except TypeError as e:
        raise ScalarTypeMismatchError(operation=operation, axis=axis, left=operand, cause=e) from e


def _check_axis_index(i: IntegerLike) -> int:
    # bool is an Integral, but indexing an axis by a truth value is a bug.
    if not isinstance(i, numbers.Integral) or isinstance(i, bool):
        raise TypeError(f"Axis index is of illegal type: {type(i).__name__}")
    if i < 0 or i >= len(AXIS_NAMES):
        raise AxisIndexError(i)
    return int(i)


def _require_vector(obj: Any, operation: str) -> None:
    if not isinstance(obj, Vector3d):
        raise TypeError(f"Cannot {operation} a vector and {type(obj).__name__}; both operands must be vectors")


@attrs.define(eq=True)
class Vector3d(Generic[_T]):
    """
    Three scalars of a common type, one for each of the x, y, and z axes.

    Instances are values: equality is component-wise, and copying a vector copies its
    three components. The only way to change a vector in place is to replace
    a single axis's value, e.g. v[1] = k.
    """

    x = attrs.field() # type: _T
    y = attrs.field() # type: _T
    z = attrs.field() # type: _T

    # Let numpy scalars on the left of an operator defer to this type rather than coerce it to an array.
    __array_ufunc__ = None

    @classmethod
    def default(cls, scalar_type: Callable[[], _T] = int) -> "Vector3d[_T]":
        """Build the vector with each component equal to the given type's default value (e.g., the zero vector)."""
        return cls(*(default_scalar(scalar_type) for _ in AXIS_NAMES))

    @staticmethod
    def field_names() -> tuple[str, str, str]:
        """Names of the components, in the order in which they're stored and serialized"""
        return AXIS_NAMES

    @classmethod
    def from_mapping(cls, m: Mapping[str, Any]) -> Result["Vector3d", Exception]:
        try:
            return Result.Ok(cls.unsafe_from_mapping(m))
        except Exception as e:
            return Result.Error(e)

    @classmethod
    def unsafe_from_mapping(cls, m: Mapping[str, Any]) -> "Vector3d":
        try:
            return cls(**m)
        except TypeError:
            logger.debug("Failed to build %s from mapping with keys: %s", cls.__name__, ", ".join(map(str, m.keys())))
            raise

    @classmethod
    def from_sequence(cls, values: Sequence[_T]) -> "Vector3d[_T]":
        """Build a vector from exactly three values, in x, y, z order."""
        if len(values) != len(AXIS_NAMES):
            raise ValueError(f"Need exactly {len(AXIS_NAMES)} values to build a vector, but got {len(values)}")
        return cls(*values)

    def to_mapping(self) -> dict[str, _T]:
        return attrs.asdict(self, recurse=False)

    @property
    def to_tuple(self) -> tuple[_T, _T, _T]:
        return attrs.astuple(self, recurse=False)

    def copy(self) -> "Vector3d[_T]":
        """Duplicate this vector, duplicating each component."""
        return Vector3d(*(copy.copy(c) for c in self))

    def __copy__(self) -> "Vector3d[_T]":
        return self.copy()

    def __len__(self) -> int:
        return len(AXIS_NAMES)

    def __iter__(self) -> Iterator[_T]:
        return iter((self.x, self.y, self.z))

    def __getitem__(self, i: int) -> _T:
        return getattr(self, AXIS_NAMES[_check_axis_index(i)])

    def __setitem__(self, i: int, value: _T) -> None:
        setattr(self, AXIS_NAMES[_check_axis_index(i)], value)

    # Unit-preserving operations

    def add(self, other: "Vector3d[_T]") -> "Vector3d[_T]":
        _require_vector(other, "add")
        return Vector3d(*(
            _apply("add", axis, lambda a, b: a + b, a, b)
            for axis, a, b in zip(AXIS_NAMES, self, other, strict=True)
        ))

    def sub(self, other: "Vector3d[_T]") -> "Vector3d[_T]":
        _require_vector(other, "subtract")
        return Vector3d(*(
            _apply("subtract", axis, lambda a, b: a - b, a, b)
            for axis, a, b in zip(AXIS_NAMES, self, other, strict=True)
        ))

    def neg(self) -> "Vector3d[_T]":
        return Vector3d(*(_apply_unary("negate", axis, lambda a: -a, a) for axis, a in zip(AXIS_NAMES, self, strict=True)))

    def __add__(self, other: Any) -> "Vector3d[_T]":
        if not isinstance(other, Vector3d):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "Vector3d[_T]":
        # The builtin sum() starts from the int 0.
        if isinstance(other, numbers.Number) and not isinstance(other, bool) and other == 0:
            return self.copy()
        return NotImplemented

    def __sub__(self, other: Any) -> "Vector3d[_T]":
        if not isinstance(other, Vector3d):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> "Vector3d[_T]":
        return self.neg()

    # Unit-changing operations

    def scalar_multiply(self, rhs: _S) -> "Vector3d[_X]":
        """Multiply each component by the given scalar (component on the left); the scalar must be a pure value."""
        return Vector3d(*(_apply("multiply", axis, lambda a, s: a * s, a, rhs) for axis, a in zip(AXIS_NAMES, self)))

    def scalar_divide(self, rhs: _S) -> "Vector3d[_X]":
        """Divide each component by the given scalar; the scalar must be a pure value."""
        return Vector3d(*(_apply("divide", axis, lambda a, s: a / s, a, rhs) for axis, a in zip(AXIS_NAMES, self)))

    def scalar_floor_divide(self, rhs: _S) -> "Vector3d[_X]":
        return Vector3d(*(_apply("floor-divide", axis, lambda a, s: a // s, a, rhs) for axis, a in zip(AXIS_NAMES, self)))

    def __mul__(self, rhs: Any) -> "Vector3d":
        if isinstance(rhs, Vector3d):
            return NotImplemented
        return self.scalar_multiply(rhs)

    def __rmul__(self, lhs: Any) -> "Vector3d":
        if isinstance(lhs, Vector3d):
            return NotImplemented
        return Vector3d(*(_apply("multiply", axis, lambda s, a: s * a, lhs, a) for axis, a in zip(AXIS_NAMES, self)))

    def __truediv__(self, rhs: Any) -> "Vector3d":
        if isinstance(rhs, Vector3d):
            return NotImplemented
        return self.scalar_divide(rhs)

    def __floordiv__(self, rhs: Any) -> "Vector3d":
        if isinstance(rhs, Vector3d):
            return NotImplemented
        return self.scalar_floor_divide(rhs)

    def dot(self, rhs: "Vector3d[SupportsMul[_T, _X]]") -> _X:
        """
        Compute the dot product of this vector with another.

        Each product takes the right-hand vector's component on the left of the
        multiplication, i.e. rhs.x * self.x + rhs.y * self.y + rhs.z * self.z.
        This matters only when the scalar multiplication doesn't commute.

        Parameters
        ----------
        rhs : Vector3d
            The vector with which to take the dot product of this one

        Returns
        -------
        The sum of the per-axis products, a bare scalar rather than a vector
        """
        if not isinstance(rhs, Vector3d):
            raise TypeError(f"Dot product requires another {Vector3d.__name__}, not {type(rhs).__name__}")
        products = [
            _apply("multiply", axis, lambda r, s: r * s, r, s)
            for axis, s, r in zip(AXIS_NAMES, self, rhs, strict=True)
        ]
        total = products[0]
        for axis, p in zip(AXIS_NAMES[1:], products[1:]):
            total = _apply("add", axis, lambda a, b: a + b, total, p)
        return total

    def cross(self, rhs: "Vector3d[SupportsMul[_T, _X]]") -> "Vector3d[_X]":
        """
        Compute the cross product of this vector with another, following the right-hand rule.

        As with the dot product, the right-hand vector's component is always the left
        operand of each multiplication, so that non-commuting scalars are handled consistently.
        """
        if not isinstance(rhs, Vector3d):
            raise TypeError(f"Cross product requires another {Vector3d.__name__}, not {type(rhs).__name__}")
        def term(axis: str, a: Any, b: Any, c: Any, d: Any) -> _X:
            # a * b - c * d
            return _apply(
                "subtract",
                axis,
                lambda p, q: p - q,
                _apply("multiply", axis, lambda r, s: r * s, a, b),
                _apply("multiply", axis, lambda r, s: r * s, c, d),
            )
        return Vector3d(
            term("x", rhs.z, self.y, rhs.y, self.z),
            term("y", rhs.x, self.z, rhs.z, self.x),
            term("z", rhs.y, self.x, rhs.x, self.y),
        )

    def norm2(self) -> _X:
        """Squared Euclidean norm, i.e. the dot product of this vector with itself"""
        return self.dot(self)

    def __str__(self) -> str:
        return format_vector(self, "")

    def __format__(self, format_spec: str) -> str:
        return format_vector(self, format_spec)
