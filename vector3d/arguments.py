"""Describing a vector on the command line, as one argument per axis"""

import argparse
from typing import Callable, Optional, TypeVar

from vector3d.scalars import default_scalar
from vector3d.vector import AXIS_NAMES, Vector3d

__author__ = "Vince Reuter"

__all__ = ["add_vector_arguments", "vector_argument_names", "vector_from_namespace"]

_T = TypeVar("_T")


def vector_argument_names(name: str) -> list[str]:
    """Get the option strings for the given vector's axes, e.g. --velocity-x, --velocity-y, --velocity-z."""
    return [f"--{name}-{axis}" for axis in AXIS_NAMES]


def _dest(name: str, axis: str) -> str:
    return f"{name}_{axis}".replace("-", "_")


def add_vector_arguments(
    parser: argparse.ArgumentParser, 
    name: str, 
    *, 
    scalar_type: Callable[[str], _T] = float, 
    required: bool = False, 
    description: Optional[str] = None,
) -> argparse._ArgumentGroup:
    """
    Register one command-line option per axis of a vector.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The parser to which to add the options
    name : str
        Name of the vector, used to build each option string, e.g. --<name>-x
    scalar_type : Callable[[str], T]
        Parser of each component's text; if it can be called with no arguments, 
        the result is the default for each component when the vector isn't required
    required : bool
        Whether each of the component options must be given
    description : str, optional
        Text for the group of options in the help message

    Notes
    -----
    argparse treats a value starting with a hyphen as an option unless it looks like a plain
    decimal number, so a negative value in exponent or fraction form must be attached
    to its option with an equals sign, e.g. --<name>-x=-1e3.

    Returns
    -------
    argparse._ArgumentGroup
        The group to which the three options were added
    """
    if not name:
        raise ValueError("Name for vector arguments can't be empty")
    group = parser.add_argument_group(name, description or f"Components of the '{name}' vector")
    default = None if required else default_scalar(scalar_type)
    for axis, option_string in zip(AXIS_NAMES, vector_argument_names(name), strict=True):
        group.add_argument(
            option_string,
            dest=_dest(name, axis),
            type=scalar_type,
            required=required,
            default=default,
            help=f"{axis} component of {name}; a negative value such as -1e3 or -1/2 must be given as {option_string}=VALUE",
        )
    return group


def vector_from_namespace(opts: argparse.Namespace, name: str) -> Vector3d:
    """Build the vector with the given name from the parsed command-line options."""
    try:
        return Vector3d(*(getattr(opts, _dest(name, axis)) for axis in AXIS_NAMES))
    except AttributeError as e:
        raise ValueError(f"No arguments for vector '{name}' in parsed options") from e
