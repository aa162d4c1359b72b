"""Tools related to the display configuration file"""

import logging
from pathlib import Path
from typing import Any, Mapping, TypeAlias

import yaml
from expression import Option, Result

from vector3d.display import Alignment, DisplayDirectives
from vector3d.exceptions import ConfigurationValueError

__author__ = "Vince Reuter"
__credits__ = ["Vince Reuter"]

ALIGNMENT_KEY = "alignment"
FILL_KEY = "fill"
PRECISION_KEY = "precision"
WIDTH_KEY = "width"

KNOWN_KEYS = (ALIGNMENT_KEY, FILL_KEY, PRECISION_KEY, WIDTH_KEY)

ConfigData: TypeAlias = Mapping[str, object]


def read_display_configuration_file(config_file: Path) -> ConfigData:
    """Parse the display configuration file from YAML; an empty file is an empty configuration."""
    logging.info("Reading display configuration file: %s", config_file)
    with open(config_file, "r") as fh:
        data = yaml.safe_load(fh)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigurationValueError(f"Display configuration must be a mapping, not {type(data).__name__}")
    return data


def get_display_directives(conf_data: ConfigData) -> Result[DisplayDirectives, ConfigurationValueError]:
    """Build the display directives from the parsed configuration data."""
    unknown = [k for k in conf_data.keys() if k not in KNOWN_KEYS]
    if unknown:
        return Result.Error(ConfigurationValueError(f"Unknown display configuration key(s): {', '.join(map(str, unknown))}"))
    return _get_optional_nonnegative_int(conf_data, PRECISION_KEY)\
        .bind(lambda precision: _get_optional_nonnegative_int(conf_data, WIDTH_KEY)\
            .bind(lambda width: _get_alignment(conf_data)\
                .bind(lambda alignment: _get_fill(conf_data)\
                    .map(lambda fill: DisplayDirectives(precision=precision, width=width, alignment=alignment, fill=fill)))))\
        .map_error(ConfigurationValueError)


def read_display_directives(config_file: Path) -> Result[DisplayDirectives, ConfigurationValueError]:
    try:
        conf_data = read_display_configuration_file(config_file)
    except ConfigurationValueError as e:
        return Result.Error(e)
    return get_display_directives(conf_data)


def _get_optional_nonnegative_int(conf_data: ConfigData, key: str) -> Result[Option[int], str]:
    match conf_data.get(key):
        case None:
            return Result.Ok(Option.Nothing())
        case bool(obj):
            return Result.Error(f"Value for display configuration key ('{key}') has illegal type: {type(obj).__name__}")
        case int(n) if n >= 0:
            return Result.Ok(Option.Some(n))
        case int(n):
            return Result.Error(f"Value for display configuration key ('{key}') is negative: {n}")
        case obj:
            return Result.Error(f"Value for display configuration key ('{key}') has illegal type: {type(obj).__name__}")


def _get_alignment(conf_data: ConfigData) -> Result[Alignment, str]:
    match conf_data.get(ALIGNMENT_KEY):
        case None:
            return Result.Ok(Alignment.Left)
        case str(s):
            return Alignment.parse(s).to_result(
                f"Illegal alignment ('{ALIGNMENT_KEY}'): {s}; choose from: {', '.join(a.name.lower() for a in Alignment)}"
            )
        case obj:
            return Result.Error(f"Alignment ('{ALIGNMENT_KEY}') has illegal type: {type(obj).__name__}")


def _get_fill(conf_data: ConfigData) -> Result[str, str]:
    match conf_data.get(FILL_KEY):
        case None:
            return Result.Ok(" ")
        case str(s) if len(s) == 1:
            return Result.Ok(s)
        case obj:
            return Result.Error(f"Fill ('{FILL_KEY}') must be a single character, not {obj!r}")
