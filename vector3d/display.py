"""Rendering vectors as text, honoring precision, width, and alignment directives"""

from enum import Enum
import re
from typing import TYPE_CHECKING, Any, Iterable

import attrs
from expression import Option, Result, option, result

if TYPE_CHECKING:
    from vector3d.vector import Vector3d

__author__ = "Vince Reuter"

__all__ = ["Alignment", "DisplayDirectives", "format_vector"]

_FORMAT_SPEC_PATTERN = re.compile(
    r"(?:(?P<fill>.)?(?P<align>[<>^]))?(?P<width>[1-9]\d*)?(?:\.(?P<precision>\d+))?(?P<type>[eEfFgG%]?)",
    re.DOTALL,
)


class Alignment(Enum):
    """Where to place a rendered vector within a field wider than the text itself"""
    Left = "<"
    Right = ">"
    Center = "^"

    @classmethod
    def parse(cls, s: str) -> Option["Alignment"]:
        """Parse alignment from either its name (case-insensitive) or its format spec symbol."""
        for a in cls:
            if s == a.value or s.lower() == a.name.lower():
                return Option.Some(a)
        return Option.Nothing()


def _is_optional_nonnegative_int(_, attribute: attrs.Attribute, value: Any):
    if not isinstance(value, Option):
        raise TypeError(f"Value for {attribute.name} isn't Option, but {type(value).__name__}")
    match value:
        case option.Option(tag="none", none=_):
            pass
        case option.Option(tag="some", some=n):
            if not isinstance(n, int) or isinstance(n, bool):
                raise TypeError(f"Value for {attribute.name} isn't option-wrapped int, but {type(n).__name__}")
            if n < 0:
                raise ValueError(f"Value for {attribute.name} is negative: {n}")


def _is_single_character(_, attribute: attrs.Attribute, value: Any):
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"Value for {attribute.name} must be a single character, not {value!r}")


@attrs.define(frozen=True, kw_only=True)
class DisplayDirectives:
    """
    Bundle of the settings which determine how a vector is rendered as text.

    The precision (and component presentation type) apply to each component separately,
    while the width, alignment, and fill apply to the whole parenthesized text.
    When no precision is given, each component uses its own default rendering.
    """

    precision = attrs.field(default=Option.Nothing(), validator=_is_optional_nonnegative_int) # type: Option[int]
    width = attrs.field(default=Option.Nothing(), validator=_is_optional_nonnegative_int) # type: Option[int]
    alignment = attrs.field(default=Alignment.Left, validator=attrs.validators.instance_of(Alignment)) # type: Alignment
    fill = attrs.field(default=" ", validator=_is_single_character) # type: str
    component_type = attrs.field(default="", validator=attrs.validators.in_(("", "e", "E", "f", "F", "g", "G", "%"))) # type: str

    @classmethod
    def parse(cls, spec: str) -> Result["DisplayDirectives", str]:
        """
        Parse a format spec of the form [[fill]align][width][.precision][type].

        A width with a leading zero is rejected, as is the = alignment, since neither zero-padding
        nor sign-aware padding applies to the parenthesized text. A 0 fill with explicit alignment, e.g. 0>12, is fine.
        """
        match = _FORMAT_SPEC_PATTERN.fullmatch(spec)
        if match is None:
            return Result.Error(f"Invalid format specifier for vector: {spec!r}")
        parts = match.groupdict()
        return Result.Ok(cls(
            precision=Option.of_optional(parts["precision"]).map(int),
            width=Option.of_optional(parts["width"]).map(int),
            alignment=Option.of_optional(parts["align"]).bind(Alignment.parse).default_value(Alignment.Left),
            fill=parts["fill"] or " ",
            component_type=parts["type"],
        ))

    @classmethod
    def unsafe_parse(cls, spec: str) -> "DisplayDirectives":
        match cls.parse(spec):
            case result.Result(tag="ok", ok=directives):
                return directives
            case result.Result(tag="error", error=err_msg):
                raise ValueError(err_msg)

    @property
    def component_spec(self) -> str:
        match self.precision:
            case option.Option(tag="some", some=p):
                return f".{p}{self.component_type or 'f'}"
            case _:
                return self.component_type

    def format_component(self, value: Any) -> str:
        spec = self.component_spec
        return format(value, spec) if spec else str(value)

    def pad(self, text: str) -> str:
        return self.width.map(lambda w: format(text, f"{self.fill}{self.alignment.value}{w}")).default_value(text)

    def render_components(self, components: Iterable[Any]) -> str:
        return self.pad("(" + ", ".join(self.format_component(c) for c in components) + ")")

    def render(self, vector: "Vector3d") -> str:
        return self.render_components(vector)


def format_vector(vector: "Vector3d", spec: str) -> str:
    """Render the given vector according to the given format spec, raising ValueError if the spec is invalid."""
    return DisplayDirectives.unsafe_parse(spec).render(vector)
