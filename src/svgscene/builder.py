"""Build a scene tree from a stream of markup events."""

from __future__ import annotations

import contextlib
import logging
from typing import IO, TYPE_CHECKING

from . import css, events, pathdata, scene
from .errors import (
    NumericParseFailure,
    SceneError,
    UnexpectedEndOfStream,
    UnknownElement,
)

if TYPE_CHECKING:
    import os
    from collections.abc import Iterable, Iterator

    from .events import MarkupEvent, StartElement, TElement

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _annotate(element_id: str | None) -> Iterator[None]:
    """Tag errors raised inside an element with the element's id."""
    try:
        yield
    except SceneError as e:
        if e.element_id is None and element_id:
            e.element_id = element_id
        raise


def parse_int(value: str) -> int:
    """Parse a base-10 32 bit integer attribute value.

    Raises:
        NumericParseFailure: If the value is not an integer.
    """
    ivalue = css.int32_value(value)
    if ivalue is None:
        raise NumericParseFailure(value)
    return ivalue


class SceneTreeBuilder:
    """Decodes markup events into a :class:`scene.SceneDocument`.

    The first event must be the start of the root (`svg`) element.
    Its `title` child supplies the document title and its `g`
    children the top level groups. Other root children are skipped.

    Groups may contain only `g` and `path` elements.
    """

    def __init__(self, markup_events: Iterable[MarkupEvent]) -> None:
        """New builder.

        Args:
            markup_events: StartElement/EndElement events.
        """
        self._events = iter(markup_events)

    def _next_event(self, tag: str) -> MarkupEvent:
        try:
            return next(self._events)
        except StopIteration:
            raise UnexpectedEndOfStream(tag) from None

    def build(self, scale: float = 0) -> scene.SceneDocument:
        """Decode the document.

        Args:
            scale: Document scale factor. See :func:`scene.document_matrix`.

        Returns:
            The scene document.

        Raises:
            SceneError: On the first error found.
        """
        start = self._next_event('svg')
        while not isinstance(start, events.StartElement):
            start = self._next_event('svg')
        return self._decode_document(start, scale)

    def _decode_document(
        self, start: StartElement, scale: float
    ) -> scene.SceneDocument:
        title: str | None = None
        groups: list[scene.GroupNode] = []
        while True:
            event = self._next_event(start.tag)
            if isinstance(event, events.EndElement):
                break
            if event.tag == 'g':
                groups.append(self._decode_group(event))
            elif event.tag == 'title':
                text = self._skip_element(event)
                title = text or ''
            else:
                logger.debug('Skipping <%s> in <%s>', event.tag, start.tag)
                self._skip_element(event)

        return scene.SceneDocument(
            title=title,
            groups=tuple(groups),
            transform=scene.document_matrix(scale),
        )

    def _decode_shape(self, start: StartElement) -> scene.Shape:
        if start.tag == 'g':
            return self._decode_group(start)
        if start.tag == 'path':
            return self._decode_path(start)
        raise UnknownElement(start.tag)

    def _decode_group(self, start: StartElement) -> scene.GroupNode:
        attrs = dict(start.attrs)
        element_id = attrs.get('id')
        with _annotate(element_id):
            stroke_width = 0
            if 'stroke-width' in attrs:
                stroke_width = parse_int(attrs['stroke-width'])
            transform_attr = attrs.get('transform')
            if transform_attr is not None:
                logger.debug('Group transform not applied: %s', transform_attr)

            children: list[scene.Shape] = []
            while True:
                event = self._next_event(start.tag)
                if isinstance(event, events.EndElement):
                    break
                children.append(self._decode_shape(event))

        return scene.GroupNode(
            id=element_id,
            stroke=attrs.get('stroke', ''),
            stroke_width=stroke_width,
            fill=attrs.get('fill', ''),
            fill_rule=attrs.get('fill-rule', ''),
            children=tuple(children),
            transform_attr=transform_attr,
        )

    def _decode_path(self, start: StartElement) -> scene.PathNode:
        attrs = dict(start.attrs)
        element_id = attrs.get('id')
        style: dict[str, css.StyleValue] = {}
        segments: list[pathdata.DrawCommand] = []
        with _annotate(element_id):
            for name, value in start.attrs:
                if name == 'style':
                    style = css.inline_style_to_dict(value)
                elif name == 'd':
                    segments = pathdata.parse_path_data(value)
            transform_attr = attrs.get('transform')
            if transform_attr is not None:
                logger.debug('Path transform not applied: %s', transform_attr)
            self._skip_children(start)

        return scene.PathNode(
            id=element_id,
            style=style,
            segments=tuple(segments),
            transform_attr=transform_attr,
        )

    def _skip_children(self, start: StartElement) -> None:
        while True:
            event = self._next_event(start.tag)
            if isinstance(event, events.EndElement):
                return
            logger.debug('Skipping <%s> in <%s>', event.tag, start.tag)
            self._skip_element(event)

    def _skip_element(self, start: StartElement) -> str | None:
        """Consume events up to the end of an element.

        Returns:
            The element's text.
        """
        depth = 1
        while True:
            event = self._next_event(start.tag)
            if isinstance(event, events.StartElement):
                depth += 1
            else:
                depth -= 1
                if depth == 0:
                    return event.text


def build_scene(
    markup_events: Iterable[MarkupEvent], scale: float = 0
) -> scene.SceneDocument:
    """Build a scene document from markup events.

    Args:
        markup_events: StartElement/EndElement events.
        scale: Document scale factor. See :func:`scene.document_matrix`.

    Returns:
        The scene document.
    """
    return SceneTreeBuilder(markup_events).build(scale=scale)


def parse_svg(
    source: str | os.PathLike | IO,
    scale: float = 0,
    huge_tree: bool = True,
) -> scene.SceneDocument:
    """Parse an SVG file or stream into a scene document.

    Args:
        source: A file name or a binary/text stream.
        scale: Document scale factor. See :func:`scene.document_matrix`.
        huge_tree: Disable security restrictions and
            support very deep trees.

    Returns:
        The scene document.

    Raises:
        SceneError: On the first malformed element.
        lxml.etree.XMLSyntaxError: If the document is not well formed.
    """
    return build_scene(
        events.iter_events(source, huge_tree=huge_tree), scale=scale
    )


def parse_svg_element(
    element: TElement, scale: float = 0
) -> scene.SceneDocument:
    """Build a scene document from an already parsed `svg` element."""
    return build_scene(events.iter_element_events(element), scale=scale)
