"""Parse and format SVG path data (the `d` attribute).

Path data is converted to a flat sequence of drawing commands.
Relative coordinates are *not* resolved to absolute coordinates,
each command carries an `absolute` flag instead and the consumer
is expected to track the current point.

Parsing happens in three passes:

1. :func:`clean_path_data` inserts a separator in front of
   negative numbers that are glued to the previous number (``10-5``).
2. :func:`split_commands` splits the cleaned string into command
   letters and the argument blocks that follow them.
3. :func:`build_commands` expands each argument block into one
   or more typed drawing commands.

:func:`parse_path_data` runs all three.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from typing import TYPE_CHECKING, Union

from typing_extensions import TypeAlias, assert_never

from .errors import (
    IncompleteArgumentGroup,
    NumericParseFailure,
    UnconsumedPathData,
    UnsupportedCommand,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class MoveTo:
    """Start a new sub-path at (x, y)."""

    absolute: bool
    x: float
    y: float


@dataclasses.dataclass(frozen=True)
class LineTo:
    """Straight line to (x, y)."""

    absolute: bool
    x: float
    y: float


@dataclasses.dataclass(frozen=True)
class CubicCurveTo:
    """Cubic Bezier curve to (x, y) with control points c1 and c2."""

    absolute: bool
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


@dataclasses.dataclass(frozen=True)
class ArcTo:
    """Elliptical arc to (x, y)."""

    absolute: bool
    rx: float
    ry: float
    x_axis_rotation: float
    large_arc_flag: bool
    sweep_flag: bool
    x: float
    y: float


@dataclasses.dataclass(frozen=True)
class ClosePath:
    """Close the current sub-path."""


DrawCommand: TypeAlias = Union[MoveTo, LineTo, CubicCurveTo, ArcTo, ClosePath]

# All SVG path command letters. Letters without an entry in
# _ARITY are recognized only so they can be reported as unsupported.
DRAWTO_COMMAND = 'MmZzLlHhVvCcSsQqTtAa'
COMMA_WSP = ', \t\n\r\f\v'
DIGIT = '0123456789'

# Largest finite 32 bit float
FLOAT32_MAX = 3.4028234663852886e38

# Number of arguments consumed by one instance of a command.
_ARITY = {
    'M': 2,
    'L': 2,
    'C': 6,
    'A': 7,
    'Z': 0,
}

# Arity of the quadratic form of a curve command.
_QUADRATIC_ARITY = 4

_RE_COMMA_WSP = re.compile(f'[{re.escape(COMMA_WSP)}]+')
_RE_FLOAT = re.compile(
    r'(([-+]?[0-9]+(\.[0-9]*)?|[-+]?\.[0-9]+)([eE][-+]?[0-9]+)?)'
)


def clean_path_data(path_data: str) -> str:
    """Separate numbers that are glued together by a minus sign.

    A space is inserted in front of every ``-`` that immediately
    follows a decimal digit, so ``'10-5'`` becomes ``'10 -5'``.
    Nothing else is changed.

    Args:
        path_data: Raw path data.

    Returns:
        The cleaned path data.
    """
    chars: list[str] = []
    prev_char = ''
    for char in path_data:
        if char == '-' and prev_char and prev_char in DIGIT:
            chars.append(' ')
        chars.append(char)
        prev_char = char
    return ''.join(chars)


def split_commands(path_data: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split cleaned path data into command letters and argument blocks.

    Each command letter gets exactly one argument block, which is
    the (possibly empty) text between that letter and the next
    command letter or the end of the string.

    Args:
        path_data: Cleaned path data.

    Returns:
        A 2-tuple of parallel tuples: (command letters, argument blocks).

    Raises:
        UnconsumedPathData: If there is anything other than whitespace
            in front of the first command letter.
    """
    commands: list[str] = []
    blocks: list[str] = []
    block_start = 0
    leading = None
    for i, char in enumerate(path_data):
        if char in DRAWTO_COMMAND:
            if commands:
                blocks.append(path_data[block_start:i])
            else:
                leading = path_data[:i]
            commands.append(char)
            block_start = i + 1
    if commands:
        blocks.append(path_data[block_start:])
    else:
        leading = path_data

    if leading is not None:
        tokens = split_arguments(leading)
        if tokens:
            raise UnconsumedPathData(len(tokens), leading.strip(COMMA_WSP))

    return tuple(commands), tuple(blocks)


def split_arguments(block: str) -> list[str]:
    """Split an argument block on commas and/or whitespace."""
    return [token for token in _RE_COMMA_WSP.split(block) if token]


def parse_number(token: str) -> float:
    """Convert a numeric path token to a float.

    The value must fit in a 32 bit float, but it is not rounded
    to 32 bit precision.

    Raises:
        NumericParseFailure: If the token is not a decimal number
            or is out of 32 bit float range.
    """
    if not _RE_FLOAT.fullmatch(token):
        raise NumericParseFailure(token)
    value = float(token)
    if abs(value) > FLOAT32_MAX:
        raise NumericParseFailure(token)
    return value


def build_commands(
    commands: Sequence[str], blocks: Sequence[str]
) -> list[DrawCommand]:
    """Expand command letters and their argument blocks to draw commands.

    An argument block may hold several argument groups, in which case
    the command is repeated once for each group.

    Args:
        commands: Command letters.
        blocks: Argument blocks, one per command letter.

    Returns:
        A list of draw commands in path order.

    Raises:
        UnsupportedCommand: For H, V, S, Q, T and quadratic
            forms of C.
        IncompleteArgumentGroup: If an argument block does not hold
            a whole number of argument groups.
        NumericParseFailure: If an argument is not a number.
        UnconsumedPathData: If there are more argument blocks
            than command letters.
    """
    segments: list[DrawCommand] = []
    index = 0
    while index < len(commands):
        letter = commands[index]
        block = blocks[index] if index < len(blocks) else ''
        segments.extend(_expand_command(letter, block))
        index += 1

    if index < len(blocks):
        remaining = blocks[index:]
        raise UnconsumedPathData(len(remaining), ' '.join(remaining))

    return segments


def _expand_command(letter: str, block: str) -> list[DrawCommand]:
    cmd = letter.upper()
    absolute = letter.isupper()

    if cmd == 'Z':
        if block.strip(COMMA_WSP):
            logger.warning('Ignoring arguments after %s: %r', letter, block)
        return [ClosePath()]

    arity = _ARITY.get(cmd)
    if arity is None:
        raise UnsupportedCommand(letter)

    args = split_arguments(block)
    nargs = len(args)
    if nargs % arity != 0:
        if cmd == 'C' and nargs % _QUADRATIC_ARITY == 0:
            raise UnsupportedCommand(letter)
        raise IncompleteArgumentGroup(letter, nargs, arity)

    values = [parse_number(arg) for arg in args]
    logger.debug('%s: %d x %d arguments', letter, nargs // arity, arity)

    segments: list[DrawCommand] = []
    for i in range(0, nargs, arity):
        p = values[i : i + arity]
        if cmd == 'M':
            segments.append(MoveTo(absolute, p[0], p[1]))
        elif cmd == 'L':
            segments.append(LineTo(absolute, p[0], p[1]))
        elif cmd == 'C':
            segments.append(
                CubicCurveTo(absolute, p[0], p[1], p[2], p[3], p[4], p[5])
            )
        elif cmd == 'A':
            segments.append(
                ArcTo(
                    absolute,
                    p[0],
                    p[1],
                    p[2],
                    bool(p[3]),
                    bool(p[4]),
                    p[5],
                    p[6],
                )
            )
    return segments


def parse_path_data(path_data: str) -> list[DrawCommand]:
    """Parse an SVG path definition string.

    Supported commands are M, L, C, A and Z in both absolute
    (upper case) and relative (lower case) forms. Repeated
    argument groups produce repeated commands, so ``'M 0,0 1,1'``
    yields two MoveTo commands.

    Args:
        path_data: The 'd' attribute value of a SVG path element.

    Returns:
        A list of draw commands.

    Raises:
        SceneError: A subclass describing the first error found.
    """
    logger.debug('path data: %r', path_data)
    commands, blocks = split_commands(clean_path_data(path_data))
    return build_commands(commands, blocks)


def _fmt(value: float) -> str:
    # Shortest repr that round trips, without a trailing '.0'
    s = repr(float(value))
    if s.endswith('.0'):
        s = s[:-2]
    return s


def format_command(command: DrawCommand) -> str:
    """Format a single draw command as compact path data."""
    if isinstance(command, ClosePath):
        return 'z'
    if isinstance(command, MoveTo):
        letter = 'M'
        params = [command.x, command.y]
    elif isinstance(command, LineTo):
        letter = 'L'
        params = [command.x, command.y]
    elif isinstance(command, CubicCurveTo):
        letter = 'C'
        params = [
            command.c1x,
            command.c1y,
            command.c2x,
            command.c2y,
            command.x,
            command.y,
        ]
    elif isinstance(command, ArcTo):
        letter = 'A'
        params = [
            command.rx,
            command.ry,
            command.x_axis_rotation,
            int(command.large_arc_flag),
            int(command.sweep_flag),
            command.x,
            command.y,
        ]
    else:
        assert_never(command)
    if not command.absolute:
        letter = letter.lower()
    paramstr = ' '.join(_fmt(param) for param in params)
    return f'{letter} {paramstr}'


def format_path_data(commands: Iterable[DrawCommand]) -> str:
    """Create SVG path data from a sequence of draw commands.

    The result parses back to an equal sequence of commands.

    Args:
        commands: Draw commands.

    Returns:
        An SVG path attribute value (the 'd' part).
    """
    return ' '.join(format_command(command) for command in commands)
