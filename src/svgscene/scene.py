"""Scene tree node types.

A parsed document is a tree of groups and paths.
Nodes are immutable and own their children, there are no
parent references.

Transforms are affine matrices in the `geom2d` form
``((a, c, e), (b, d, f))``. Node `transform` attributes are
not parsed, nodes always carry the identity matrix and keep the
raw attribute value in `transform_attr`.
"""

from __future__ import annotations

import dataclasses
import types
from typing import TYPE_CHECKING, Union

from geom2d import transform2d
from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from geom2d.transform2d import TMatrix

    from .css import StyleValue
    from .pathdata import DrawCommand

IDENTITY_MATRIX: TMatrix = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))


def document_matrix(scale: float) -> TMatrix:
    """Document transform for a scale factor.

    A positive scale is used as is, a negative scale is
    inverted (ie -4 scales by 1/4), and zero means no scaling.
    """
    if scale > 0:
        return transform2d.matrix_scale(scale, scale)
    if scale < 0:
        scale = 1.0 / -scale
        return transform2d.matrix_scale(scale, scale)
    return IDENTITY_MATRIX


@dataclasses.dataclass(frozen=True)
class PathNode:
    """A `path` element.

    The style map is copied into a read-only mapping.
    """

    id: str | None = None
    style: Mapping[str, StyleValue] = dataclasses.field(
        default_factory=dict, hash=False
    )
    segments: tuple[DrawCommand, ...] = ()
    transform: TMatrix = IDENTITY_MATRIX
    # Unparsed `transform` attribute value
    transform_attr: str | None = None

    def __post_init__(self) -> None:
        style = types.MappingProxyType(dict(self.style))
        object.__setattr__(self, 'style', style)


@dataclasses.dataclass(frozen=True)
class GroupNode:
    """A `g` element and its child shapes.

    A `stroke_width` of zero means the attribute was not set.
    """

    id: str | None = None
    stroke: str = ''
    stroke_width: int = 0
    fill: str = ''
    fill_rule: str = ''
    children: tuple[Shape, ...] = ()
    transform: TMatrix = IDENTITY_MATRIX
    transform_attr: str | None = None

    def walk(self, depth: int = 0) -> Iterator[tuple[int, Shape]]:
        """Depth-first traversal of this group's descendants.

        Yields:
            (depth, node) tuples in document order, where
            direct children have depth `depth` + 1.
        """
        for child in self.children:
            yield depth + 1, child
            if isinstance(child, GroupNode):
                yield from child.walk(depth + 1)


Shape: TypeAlias = Union[GroupNode, PathNode]


@dataclasses.dataclass(frozen=True)
class SceneDocument:
    """The root `svg` element."""

    title: str | None = None
    groups: tuple[GroupNode, ...] = ()
    transform: TMatrix = IDENTITY_MATRIX

    def walk(self) -> Iterator[tuple[int, Shape]]:
        """Depth-first traversal of all groups and paths.

        Yields:
            (depth, node) tuples in document order.
            Top level groups have depth 0.
        """
        for group in self.groups:
            yield 0, group
            yield from group.walk(0)
