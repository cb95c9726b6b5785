"""Test SVG path data parsing and formatting."""

from __future__ import annotations

import pytest
from svgscene import pathdata
from svgscene.errors import (
    IncompleteArgumentGroup,
    NumericParseFailure,
    UnconsumedPathData,
    UnsupportedCommand,
)
from svgscene.pathdata import ArcTo, ClosePath, CubicCurveTo, LineTo, MoveTo

POLY1 = """
M 2.86579 7.19138
L 2.60321 5.60556
L 2.66237 5.80965
L 2.66237 5.6006
L 2.75099 5.96077
Z
"""
POLY1_LEN = 6

# Same polyline, compact form with glued negative numbers
POLY2 = 'm2.86579-7.19138l-.26258 1.58582 .05916 .20409-0-.20905z'

ARC_PATH = """
M -47.255922,-6.9329234
A 47.76178,47.76178 0 0 1 -6.8672278,-47.265514
  47.76178,47.76178 0 0 1 43.329158,-20.094071
L 0,0
Z
"""


def test_clean_path_data() -> None:
    """Negative numbers glued to a digit get a separator."""
    assert pathdata.clean_path_data('10-5 3.5-2') == '10 -5 3.5 -2'
    assert pathdata.clean_path_data('-5') == '-5'
    assert pathdata.clean_path_data('M10-5') == 'M10 -5'
    assert pathdata.clean_path_data('L-3-4') == 'L-3 -4'
    # Exponents and decimal points are left alone
    assert pathdata.clean_path_data('1e-5') == '1e-5'
    assert pathdata.clean_path_data('1.5.5') == '1.5.5'
    assert pathdata.clean_path_data('') == ''


def test_split_commands() -> None:
    """Each command letter gets the block of text that follows it."""
    commands, blocks = pathdata.split_commands('M0 0L1,1z')
    assert commands == ('M', 'L', 'z')
    assert blocks == ('0 0', '1,1', '')

    assert pathdata.split_commands('') == ((), ())
    assert pathdata.split_commands('  \n') == ((), ())

    with pytest.raises(UnconsumedPathData) as excinfo:
        pathdata.split_commands('5 5 M0 0')
    assert excinfo.value.remaining_count == 2
    assert excinfo.value.remaining_content == '5 5'


def test_repeated_moveto() -> None:
    """One M with three coordinate pairs yields three MoveTo commands."""
    segments = pathdata.parse_path_data('M10,10 20,20 30,30')
    assert segments == [
        MoveTo(True, 10, 10),
        MoveTo(True, 20, 20),
        MoveTo(True, 30, 30),
    ]

    segments = pathdata.parse_path_data('m10,10 20,20')
    assert segments == [MoveTo(False, 10, 10), MoveTo(False, 20, 20)]


def test_cubic_repetitions() -> None:
    """Twelve cubic arguments yield two curves."""
    segments = pathdata.parse_path_data('c0,0 10,10 20,0 20,20 30,30 40,0')
    assert segments == [
        CubicCurveTo(False, 0, 0, 10, 10, 20, 0),
        CubicCurveTo(False, 20, 20, 30, 30, 40, 0),
    ]


def test_arc() -> None:
    """Arc flags are booleans."""
    segments = pathdata.parse_path_data('M0 0 A5,5 30 1 0 10,10')
    assert segments[1] == ArcTo(True, 5, 5, 30, True, False, 10, 10)

    segments = pathdata.parse_path_data(ARC_PATH)
    assert len(segments) == 5
    assert isinstance(segments[1], ArcTo)
    assert isinstance(segments[2], ArcTo)
    assert segments[2].x == pytest.approx(43.329158)
    assert segments[3] == LineTo(True, 0, 0)
    assert segments[4] == ClosePath()


def test_arc_incomplete() -> None:
    """Arc argument count must be a multiple of seven."""
    with pytest.raises(IncompleteArgumentGroup) as excinfo:
        pathdata.parse_path_data('M0 0 a 1 1 0 0 1 5')
    assert excinfo.value.command == 'a'
    assert excinfo.value.provided_count == 6
    assert excinfo.value.required_arity == 7


def test_incomplete_lineto() -> None:
    with pytest.raises(IncompleteArgumentGroup) as excinfo:
        pathdata.parse_path_data('M0 0 L 1 2 3')
    assert excinfo.value.command == 'L'
    assert 'left over' in str(excinfo.value)


def test_close_path() -> None:
    """Z emits one ClosePath and ignores what follows it."""
    assert pathdata.parse_path_data('z') == [ClosePath()]
    assert pathdata.parse_path_data('z   \n') == [ClosePath()]
    segments = pathdata.parse_path_data('M0 0 L1 1 Z  ')
    assert segments == [MoveTo(True, 0, 0), LineTo(True, 1, 1), ClosePath()]
    assert pathdata.parse_path_data('M0 0z 5') == [
        MoveTo(True, 0, 0),
        ClosePath(),
    ]


def test_polyline() -> None:
    segments = pathdata.parse_path_data(POLY1)
    assert len(segments) == POLY1_LEN
    assert segments[0] == MoveTo(True, 2.86579, 7.19138)
    assert all(isinstance(s, LineTo) for s in segments[1:-1])

    segments = pathdata.parse_path_data(POLY2)
    assert segments == [
        MoveTo(False, 2.86579, -7.19138),
        LineTo(False, -0.26258, 1.58582),
        LineTo(False, 0.05916, 0.20409),
        LineTo(False, -0.0, -0.20905),
        ClosePath(),
    ]


def test_glued_negative_numbers() -> None:
    segments = pathdata.parse_path_data('M10-5L-3-4')
    assert segments == [MoveTo(True, 10, -5), LineTo(True, -3, -4)]

    segments = pathdata.parse_path_data('M1e-5,2')
    assert segments == [MoveTo(True, 1e-5, 2)]


def test_unsupported_commands() -> None:
    """H, V, S, Q, T and quadratic C are rejected."""
    for d, letter in (
        ('M0 0 H10', 'H'),
        ('M0 0 h10', 'h'),
        ('M0 0 V10', 'V'),
        ('M0 0 v10', 'v'),
        ('M0 0 Q1 1 2 2', 'Q'),
        ('M0 0 t2 2', 't'),
        ('M0 0 S1 1 2 2', 'S'),
        ('M0 0 c1 1 2 2', 'c'),
    ):
        with pytest.raises(UnsupportedCommand) as excinfo:
            pathdata.parse_path_data(d)
        assert excinfo.value.letter == letter

    # Neither cubic nor quadratic
    with pytest.raises(IncompleteArgumentGroup):
        pathdata.parse_path_data('M0 0 C 1 2 3')


def test_numeric_failure() -> None:
    with pytest.raises(NumericParseFailure) as excinfo:
        pathdata.parse_path_data('M1 x')
    assert excinfo.value.token == 'x'

    with pytest.raises(NumericParseFailure) as excinfo:
        pathdata.parse_path_data('M1.2.3 4')
    assert excinfo.value.token == '1.2.3'

    # Out of 32 bit float range
    with pytest.raises(NumericParseFailure) as excinfo:
        pathdata.parse_path_data('M1e39 0')
    assert excinfo.value.token == '1e39'
    assert pathdata.parse_path_data('M-3.4e38 0') == [MoveTo(True, -3.4e38, 0)]


def test_unconsumed_blocks() -> None:
    """More argument blocks than commands is an error."""
    with pytest.raises(UnconsumedPathData) as excinfo:
        pathdata.build_commands(['M'], ['0 0', '1 1'])
    assert excinfo.value.remaining_count == 1
    assert excinfo.value.element_id is None


def test_empty_path() -> None:
    assert pathdata.parse_path_data('') == []
    assert pathdata.parse_path_data('M') == []


def test_format_path_data() -> None:
    segments = [
        MoveTo(True, 10, -5),
        LineTo(False, 0.5, 2),
        ArcTo(True, 5, 5, 30, True, False, 10, 10),
        ClosePath(),
    ]
    assert pathdata.format_path_data(segments) == (
        'M 10 -5 l 0.5 2 A 5 5 30 1 0 10 10 z'
    )
    assert pathdata.format_path_data([]) == ''


def test_round_trip() -> None:
    """Formatted path data parses back to the same commands."""
    for d in (
        POLY1,
        POLY2,
        ARC_PATH,
        'c0,0 10,10 20,0 20,20 30,30 40,0',
        'M1e-7 -2.5e16 l.1-.2 a1 2 -45 0 1 3 4z',
    ):
        segments = pathdata.parse_path_data(d)
        d2 = pathdata.format_path_data(segments)
        assert pathdata.parse_path_data(d2) == segments
