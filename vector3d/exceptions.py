"""Custom exception types to more accurately represent difficulties"""

__all__ = [
    "AxisIndexError", 
    "ConfigurationValueError", 
    "ScalarTypeMismatchError", 
    "VectorException",
    ]
__author__ = "Vince Reuter"

# Second operand of a unary operation
_NO_OPERAND = object()


class VectorException(BaseException):
    "General base for exceptional situations related to the specifics of this project"
    pass


class AxisIndexError(VectorException):
    """Error subtype for when a vector is indexed by something other than 0, 1, or 2"""

    def __init__(self, index: int):
        super().__init__(f"Invalid axis index: {index}; must be one of 0, 1, 2 (x, y, z)")
        self.index = index


class ConfigurationValueError(VectorException):
    "Exception subtype for when something's wrong with a config file value"
    pass


class ScalarTypeMismatchError(TypeError):
    """Error subtype for when a component operation isn't supported by the scalar types involved"""

    def __init__(self, *, operation: str, axis: str, left: object, cause: TypeError, right: object = _NO_OPERAND):
        if right is _NO_OPERAND:
            message = f"Cannot {operation} {axis} component of type {type(left).__name__}: {cause}"
        else:
            message = f"Cannot {operation} on {axis} components of types {type(left).__name__} and {type(right).__name__}: {cause}"
        super().__init__(message)
        self.operation = operation
        self.axis = axis
