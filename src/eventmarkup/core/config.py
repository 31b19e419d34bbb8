"""Parsing of property-style encoder configuration.

Configurators usually hand options over as strings, e.g. from a properties
file or environment variables. This module turns such a mapping into
EncoderOptions.
"""

from collections.abc import Mapping

from eventmarkup.core.models import EncoderOptions

_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0"}

# Option keys, normalized to lowercase without underscores
_LOCATION_INFO_KEYS = {"locationinfo"}


def _normalize_key(key: str) -> str:
    return key.replace("_", "").lower()


def parse_bool(value: str | bool) -> bool:
    """Parse a boolean option value.

    Args:
        value: A bool, or one of true/false/yes/no/on/off/1/0 (any case).

    Returns:
        The parsed boolean.

    Raises:
        ValueError: If the value is not a recognized boolean.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean option value: {value!r}")


def options_from_mapping(mapping: Mapping[str, str | bool]) -> EncoderOptions:
    """Build EncoderOptions from a property-style mapping.

    Keys are matched case-insensitively and underscores are ignored, so
    ``LocationInfo`` and ``location_info`` are equivalent. Missing keys
    keep their defaults.

    Args:
        mapping: Option names to values.

    Returns:
        The parsed options.

    Raises:
        ValueError: On unknown keys or unparsable values.
    """
    location_info = False
    for key, value in mapping.items():
        if _normalize_key(key) in _LOCATION_INFO_KEYS:
            location_info = parse_bool(value)
        else:
            raise ValueError(f"Unknown encoder option: {key!r}")
    return EncoderOptions(location_info=location_info)
