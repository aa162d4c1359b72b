"""Norms, normalization, and random vectors

Taking a square root is left to numpy, which handles plain numbers and numpy scalars directly,
and dispatches to a sqrt() method for other (object) scalars, e.g. unit-aware quantities.
"""

from typing import Any, Optional

import numpy as np

from vector3d.scalars import FloatLike
from vector3d.vector import Vector3d

__author__ = "Vince Reuter"

__all__ = ["gaussian_random_vector", "norm", "normalized"]


def norm(vector: Vector3d) -> Any:
    """Euclidean norm (length) of the given vector"""
    return np.sqrt(vector.norm2())


def normalized(vector: Vector3d) -> Vector3d:
    """
    Scale the given vector to unit length.

    Parameters
    ----------
    vector : Vector3d
        The vector to normalize

    Returns
    -------
    Vector3d
        Vector in the same direction as the input, with length 1 (and dimensionless components, 
        if the input's components carry units)

    Raises
    ------
    ZeroDivisionError
        If the given vector has zero length
    """
    n = norm(vector)
    if n == 0:
        raise ZeroDivisionError(f"Cannot normalize a vector of zero length: {vector}")
    return vector / n


def gaussian_random_vector(scale: FloatLike = 1.0, rng: Optional[np.random.Generator] = None) -> Vector3d[float]:
    """Draw each component independently from a normal distribution centered on 0, with the given standard deviation."""
    if scale < 0:
        raise ValueError(f"Scale for random vector must be nonnegative: {scale}")
    if rng is None:
        rng = np.random.default_rng()
    x, y, z = rng.normal(loc=0.0, scale=scale, size=3)
    return Vector3d(float(x), float(y), float(z))
