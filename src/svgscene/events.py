"""Markup event sources for the scene tree builder.

The builder consumes a flat stream of :class:`StartElement` and
:class:`EndElement` events. End of stream is the end of iteration.
Any tokenizer can produce these, the functions here use lxml.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, NamedTuple, Union

from lxml import etree
from typing_extensions import TypeAlias

if TYPE_CHECKING:
    import os
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

TElement: TypeAlias = (
    etree._Element  # noqa: SLF001 pylint: disable=protected-access
)


class StartElement(NamedTuple):
    """Element start tag with its attributes in document order."""

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()


class EndElement(NamedTuple):
    """Element end tag.

    `text` is the character data directly inside the element
    (before its first child), if any.
    """

    tag: str
    text: str | None = None


MarkupEvent: TypeAlias = Union[StartElement, EndElement]


def strip_ns(tag: str) -> str:
    """Strip the namespace part from the tag if any."""
    return tag.rpartition('}')[2]


def _element_event(event: str, element: TElement) -> MarkupEvent | None:
    if not isinstance(element.tag, str):
        # Comments and processing instructions
        return None
    tag = strip_ns(element.tag)
    if event == 'start':
        attrs = tuple(
            (strip_ns(name), value) for name, value in element.items()
        )
        return StartElement(tag, attrs)
    return EndElement(tag, element.text)


def iter_events(
    source: str | os.PathLike | IO, huge_tree: bool = True
) -> Iterator[MarkupEvent]:
    """Parse an SVG document incrementally and yield markup events.

    Args:
        source: A file name or a binary/text stream.
        huge_tree: Disable security restrictions and
            support very deep trees.

    Yields:
        StartElement and EndElement events in document order.
    """
    context = etree.iterparse(
        source, events=('start', 'end'), huge_tree=huge_tree
    )
    for event, element in context:
        markup_event = _element_event(event, element)
        if markup_event is not None:
            yield markup_event
        if event == 'end':
            # Everything needed has been read, free the subtree.
            element.clear(keep_tail=True)


def iter_element_events(element: TElement) -> Iterator[MarkupEvent]:
    """Yield markup events for an already parsed element tree.

    Args:
        element: Root element of the (sub)tree, ie the `svg` element.

    Yields:
        StartElement and EndElement events in document order.
    """
    for event, node in etree.iterwalk(element, events=('start', 'end')):
        markup_event = _element_event(event, node)
        if markup_event is not None:
            yield markup_event
