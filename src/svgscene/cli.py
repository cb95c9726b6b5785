"""Command line tool that prints the scene tree of an SVG document."""

from __future__ import annotations

import argparse
import datetime
import gettext
import logging
import os
import pathlib
import sys
from typing import TYPE_CHECKING, Any, TextIO

from lxml import etree

from . import builder, css, pathdata, scene
from .errors import SceneError

if TYPE_CHECKING:
    from collections.abc import Iterator

_ = gettext.gettext
logger = logging.getLogger(__name__)


def argbool(value: str | int | bool) -> bool:
    """Argparse boolean type.

    Convert a string boolean (ie 'True' or 'False') to Python boolean.
    """
    boolstr = str(value).lower()
    if boolstr in {'true', 't', 'yes', 'y', '1'}:
        return True
    if boolstr in {'false', 'f', 'no', 'n', '0'}:
        return False
    raise argparse.ArgumentTypeError(f'Invalid boolean value: {value}')


def errormsg(*args: Any, **kwargs: Any) -> None:  # noqa: ANN401
    """Write an error msg to stderr.

    Intended for end-user-visible messages (usually error conditions).
    """
    print(*args, file=sys.stderr, **kwargs)  # noqa: T201


def outline(
    document: scene.SceneDocument, indent: str = '  '
) -> Iterator[str]:
    """Describe the scene tree, one line per node.

    Args:
        document: A parsed scene document.
        indent: Indentation per tree level.

    Yields:
        Lines of text without line endings.
    """
    yield f'svg title={document.title!r}'
    for depth, node in document.walk():
        prefix = indent * (depth + 1)
        if isinstance(node, scene.GroupNode):
            yield (
                f'{prefix}g id={node.id!r} stroke={node.stroke!r} '
                f'stroke-width={node.stroke_width} fill={node.fill!r} '
                f'fill-rule={node.fill_rule!r}'
            )
        else:
            style = css.dict_to_inline_style(node.style)
            d = pathdata.format_path_data(node.segments)
            yield f'{prefix}path id={node.id!r} style={style!r} d={d!r}'


def write_outline(document: scene.SceneDocument, output: TextIO) -> None:
    """Write the scene tree outline to a text stream."""
    for line in outline(document):
        output.write(line)
        output.write('\n')


def _process_options(argv: list | None) -> argparse.Namespace:
    """Set up option spec and parse command line options."""
    parser = argparse.ArgumentParser(
        prog='svgscene',
        description=_('Print the group/path scene tree of an SVG document.'),
    )
    parser.add_argument(
        '--scale',
        type=float,
        default=0,
        help=_('Document scale (negative values divide, 0 is no scaling)'),
    )
    parser.add_argument(
        '--output-file', '-o', type=pathlib.Path, help=_('Output file.')
    )
    parser.add_argument(
        '--log-create', type=argbool, default=False, help=_('Create log file')
    )
    parser.add_argument('--log-level', default='DEBUG', help=_('Log level'))
    parser.add_argument(
        '--log-filename',
        default=None,
        help=_('Full pathname of log file'),
    )
    # Path to input file if any
    parser.add_argument(
        'input_file',
        nargs='?',
        type=pathlib.Path,
        help=_('Path name of input file'),
    )
    return parser.parse_args(argv)


def _create_log(
    log_path: str | os.PathLike | None, log_level: str | None
) -> None:
    """Create a log file for debug output.

    Args:
        log_path: Path to log file. If None or empty
            the log path name will be 'svgscene.log' in
            the user's home directory.
        log_level: Log level:
            'DEBUG', 'INFO', 'WARNING', 'ERROR', or 'CRITICAL'.
            Default is 'INFO'.
    """
    if not log_path:
        log_path = pathlib.Path.home() / 'svgscene.log'
    if not log_level:
        log_level = 'INFO'
    logging.basicConfig(
        filename=pathlib.Path(log_path).expanduser(),
        filemode='w',
        level=log_level.upper(),
    )
    logger.info(
        'Log started %s, level=%s',
        datetime.datetime.now(tz=datetime.timezone.utc),
        logging.getLevelName(logger.getEffectiveLevel()),
    )
    logger.info('PWD = "%s"', os.environ.get('PWD', ''))
    logger.info('Python version: %s', sys.version)


def main(argv: list | None = None) -> int:
    """Entry point for the `svgscene` command.

    Args:
        argv: Command line options, default is sys.argv[1:]

    Returns:
        Process exit status.
    """
    options = _process_options(argv)
    if options.log_create:
        _create_log(options.log_filename, options.log_level)
        logger.info('Invocation: %s', ' '.join(argv or sys.argv))
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        if options.input_file:
            with options.input_file.open('rb') as f:
                document = builder.parse_svg(f, scale=options.scale)
        else:
            document = builder.parse_svg(sys.stdin.buffer, scale=options.scale)
    except SceneError as e:
        errormsg(f'Invalid SVG scene: {e}')
        return 1
    except (OSError, etree.XMLSyntaxError) as e:
        errormsg(f'Unable to parse SVG input: {e}')
        return 1

    logger.info('Groups: %d', len(document.groups))

    try:
        if options.output_file:
            with options.output_file.open('w', encoding='utf8') as f:
                write_outline(document, f)
        else:
            write_outline(document, sys.stdout)
    except OSError as e:
        errormsg(f'Unable to write output: {e}')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
