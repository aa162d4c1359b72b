"""Three-dimensional vectors over generic, possibly unit-carrying, scalar types"""

from vector3d.display import Alignment, DisplayDirectives
from vector3d.exceptions import AxisIndexError, ConfigurationValueError, ScalarTypeMismatchError, VectorException
from vector3d.summation import sum_vector_copies, sum_vectors
from vector3d.vector import AXIS_NAMES, Vector3d

__all__ = [
    "AXIS_NAMES",
    "Alignment",
    "AxisIndexError",
    "ConfigurationValueError",
    "DisplayDirectives",
    "ScalarTypeMismatchError",
    "Vector3d",
    "VectorException",
    "sum_vector_copies",
    "sum_vectors",
    ]
