"""Parse and format inline CSS style properties."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union

from typing_extensions import TypeAlias

from .errors import MalformedStyleDeclaration, NumericParseFailure
from .pathdata import parse_number

if TYPE_CHECKING:
    from collections.abc import Mapping

StyleValue: TypeAlias = Union[int, float, str]

# SVG whitespace
_SVG_WS = ' \t\r\n\f'

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_RE_INT = re.compile(r'[-+]?[0-9]+', flags=re.ASCII)


def int32_value(value: str) -> int | None:
    """Convert a base-10 integer string that fits in 32 bits.

    Returns:
        The integer value or None if `value` is not a 32 bit integer.
    """
    if _RE_INT.fullmatch(value):
        ivalue = int(value)
        if INT32_MIN <= ivalue <= INT32_MAX:
            return ivalue
    return None


def style_value(value: str) -> StyleValue:
    """Infer the type of a style property value.

    Tries a base-10 (32 bit) integer first, then a float,
    otherwise the value is kept as a string.
    Floats are kept in double precision but must be
    within 32 bit float range, so '1e39' stays a string.
    """
    ivalue = int32_value(value)
    if ivalue is not None:
        return ivalue
    try:
        return parse_number(value)
    except NumericParseFailure:
        return value


def inline_style_to_dict(inline_style: str | None) -> dict[str, StyleValue]:
    """Create a dictionary of style properties from an inline style attribute.

    Values are converted to int or float where possible.
    Empty declarations (ie a trailing ';') are skipped.

    Args:
        inline_style: A string containing the value of a CSS `style` attribute.

    Returns:
        A dictionary of style properties.

    Raises:
        MalformedStyleDeclaration: If a declaration does not have
            exactly one ':' separator.
    """
    style_map: dict[str, StyleValue] = {}
    if inline_style is not None and inline_style:
        for style_property in inline_style.split(';'):
            if not style_property.strip(_SVG_WS):
                continue
            parts = style_property.split(':')
            if len(parts) != 2:  # noqa: PLR2004
                raise MalformedStyleDeclaration(style_property.strip(_SVG_WS))
            name = parts[0].strip(_SVG_WS)
            value = parts[1].strip(_SVG_WS)
            style_map[name] = style_value(value)
    return style_map


def dict_to_inline_style(style_map: Mapping[str, StyleValue]) -> str:
    """Create an inline style attribute string.

    From a dictionary of CSS style properties.

    Args:
        style_map: A mapping of CSS style properties.

    Returns:
        A string containing inline CSS style properties.
    """
    style_properties = [f'{name}:{value}' for name, value in style_map.items()]
    return ';'.join(style_properties)
