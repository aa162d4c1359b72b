"""Command-line calculator for three-dimensional vectors"""

import argparse
from enum import Enum
import logging
from pathlib import Path
from typing import Any, Callable, Optional

import attrs
from expression import Option, result

from vector3d.arguments import add_vector_arguments, vector_from_namespace
from vector3d.configuration import read_display_directives
from vector3d.display import Alignment, DisplayDirectives
from vector3d.norms import norm, normalized
from vector3d.vector import Vector3d

__author__ = "Vince Reuter"


class Operation(Enum):
    """What the calculator can compute, from vectors a and b and a scalar"""
    Add = "add"
    Subtract = "sub"
    Negate = "neg"
    Scale = "scale"
    Divide = "divide"
    Dot = "dot"
    Cross = "cross"
    Norm2 = "norm2"
    Norm = "norm"
    Normalize = "normalize"

    @classmethod
    def names(cls) -> list[str]:
        return [op.value for op in cls]

    def compute(self, *, a: Vector3d, b: Vector3d, scalar: float) -> Any:
        funcs: dict["Operation", Callable[[], Any]] = {
            Operation.Add: lambda: a + b,
            Operation.Subtract: lambda: a - b,
            Operation.Negate: lambda: -a,
            Operation.Scale: lambda: a * scalar,
            Operation.Divide: lambda: a / scalar,
            Operation.Dot: lambda: a.dot(b),
            Operation.Cross: lambda: a.cross(b),
            Operation.Norm2: lambda: a.norm2(),
            Operation.Norm: lambda: norm(a),
            Operation.Normalize: lambda: normalized(a),
        }
        return funcs[self]()


def nonnegative_int(arg: str) -> int:
    try:
        n = int(arg)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Not an integer: {arg}") from e
    if n < 0:
        raise argparse.ArgumentTypeError(f"Must be non-negative: {n}")
    return n


def parse_cmdl(cmdl: Optional[list[str]]) -> argparse.Namespace:
    """Define and parse the command-line interface."""
    parser = argparse.ArgumentParser(
        description="Compute with three-dimensional vectors.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("operation", choices=Operation.names(), help="What to compute")
    add_vector_arguments(parser, "a", description="Components of the first (left-hand) vector")
    add_vector_arguments(parser, "b", description="Components of the second (right-hand) vector")
    parser.add_argument("--scalar", type=float, default=1.0, help="Scalar by which to multiply or divide vector a")
    parser.add_argument("--config", type=Path, help="Path to YAML display configuration file")
    parser.add_argument("--precision", type=nonnegative_int, help="Number of fraction digits for each component, overriding configuration")
    parser.add_argument("--width", type=nonnegative_int, help="Minimum width of the output, overriding configuration")
    parser.add_argument(
        "--alignment",
        choices=[a.name.lower() for a in Alignment],
        help="Alignment of output within the minimum width, overriding configuration",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    return parser.parse_args(cmdl)


def determine_display_directives(opts: argparse.Namespace) -> DisplayDirectives:
    """Read the display configuration, if any, and apply the command-line overrides."""
    if opts.config is None:
        directives = DisplayDirectives()
    else:
        match read_display_directives(opts.config):
            case result.Result(tag="ok", ok=directives):
                logging.debug("Display directives from configuration: %s", directives)
            case result.Result(tag="error", error=err):
                raise err
    overrides: dict[str, Any] = {}
    if opts.precision is not None:
        overrides["precision"] = Option.Some(opts.precision)
    if opts.width is not None:
        overrides["width"] = Option.Some(opts.width)
    if opts.alignment is not None:
        overrides["alignment"] = Alignment.parse(opts.alignment).default_value(Alignment.Left)
    return attrs.evolve(directives, **overrides)


def render_result(value: Any, directives: DisplayDirectives) -> str:
    if isinstance(value, Vector3d):
        return directives.render(value)
    return directives.pad(directives.format_component(value))


def workflow(*, operation: Operation, a: Vector3d, b: Vector3d, scalar: float, directives: DisplayDirectives) -> str:
    """Main workhorse of this program"""
    logging.info("Computing %s with a=%s, b=%s, scalar=%s", operation.value, a, b, scalar)
    value = operation.compute(a=a, b=b, scalar=scalar)
    return render_result(value, directives)


def main(cmdl: Optional[list[str]] = None) -> None:
    """Driver function of this program"""
    opts = parse_cmdl(cmdl)
    logging.basicConfig(level=getattr(logging, opts.log_level))
    directives = determine_display_directives(opts)
    output = workflow(
        operation=Operation(opts.operation),
        a=vector_from_namespace(opts, "a"),
        b=vector_from_namespace(opts, "b"),
        scalar=opts.scalar,
        directives=directives,
    )
    print(output)
    logging.info("Done!")


if __name__ == "__main__":
    main()
