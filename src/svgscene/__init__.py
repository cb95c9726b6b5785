"""Parse simple SVG documents into a scene tree of groups and paths.

Path data is parsed into typed drawing commands and inline styles
into typed property maps. The resulting tree is meant to be walked
by a renderer that keeps track of the current point and transforms.
"""

import importlib.metadata

from .builder import (
    SceneTreeBuilder,
    build_scene,
    parse_svg,
    parse_svg_element,
)
from .css import inline_style_to_dict
from .errors import (
    IncompleteArgumentGroup,
    MalformedStyleDeclaration,
    NumericParseFailure,
    SceneError,
    UnconsumedPathData,
    UnexpectedEndOfStream,
    UnknownElement,
    UnsupportedCommand,
)
from .pathdata import (
    ArcTo,
    ClosePath,
    CubicCurveTo,
    DrawCommand,
    LineTo,
    MoveTo,
    format_path_data,
    parse_path_data,
)
from .scene import GroupNode, PathNode, SceneDocument, Shape

__version__ = importlib.metadata.version('utl-svgscene')

__all__ = [
    'ArcTo',
    'ClosePath',
    'CubicCurveTo',
    'DrawCommand',
    'GroupNode',
    'IncompleteArgumentGroup',
    'LineTo',
    'MalformedStyleDeclaration',
    'MoveTo',
    'NumericParseFailure',
    'PathNode',
    'SceneDocument',
    'SceneError',
    'SceneTreeBuilder',
    'Shape',
    'UnconsumedPathData',
    'UnexpectedEndOfStream',
    'UnknownElement',
    'UnsupportedCommand',
    'build_scene',
    'format_path_data',
    'inline_style_to_dict',
    'parse_path_data',
    'parse_svg',
    'parse_svg_element',
]
