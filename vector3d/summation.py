"""Accumulating sequences of vectors into a single vector"""

import functools
from typing import Callable, Iterable, TypeVar

from numpydoc_decorator import doc

from vector3d.scalars import SupportsAddSelf
from vector3d.vector import Vector3d

__author__ = "Vince Reuter"

__all__ = ["sum_vector_copies", "sum_vectors"]

_T = TypeVar("_T", bound=SupportsAddSelf)


@doc(
    summary="Add up vectors component-wise, starting from the first one",
    parameters=dict(
        vectors="The vectors to add up; the collection is traversed once",
        scalar_type="Type whose default value is used for each component when there are no vectors to add",
    ),
    returns="The component-wise sum of the given vectors, or the default (zero) vector if there are none",
)
def sum_vectors(vectors: Iterable[Vector3d[_T]], scalar_type: Callable[[], _T] = int) -> Vector3d[_T]:
    iterator = iter(vectors)
    try:
        first = next(iterator)
    except StopIteration:
        return Vector3d.default(scalar_type)
    # Start from a copy so that even a single-vector sum is a new vector.
    return functools.reduce(Vector3d.add, iterator, first.copy())


@doc(
    summary="Add up vectors component-wise, copying each one before adding it into the total",
    parameters=dict(
        vectors="The vectors to add up, none of which will be shared with the result",
        scalar_type="Type whose default value is used for each component when there are no vectors to add",
    ),
    returns="The component-wise sum of copies of the given vectors, or the default (zero) vector if there are none",
)
def sum_vector_copies(vectors: Iterable[Vector3d[_T]], scalar_type: Callable[[], _T] = int) -> Vector3d[_T]:
    return sum_vectors((v.copy() for v in vectors), scalar_type=scalar_type)
