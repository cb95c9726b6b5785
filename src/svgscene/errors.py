"""Exceptions raised while parsing SVG path data, styles and scene trees."""

from __future__ import annotations


class SceneError(ValueError):
    """Base class for SVG scene data errors.

    Attributes:
        element_id: The `id` attribute of the enclosing element,
            if known. This is filled in by the scene tree builder
            as the error propagates out of an element.
    """

    element_id: str | None = None

    def detail(self) -> str:
        """Error message without the element annotation."""
        return super().__str__()

    def __str__(self) -> str:
        msg = self.detail()
        if self.element_id:
            return f'{msg} (element id="{self.element_id}")'
        return msg


class MalformedStyleDeclaration(SceneError):
    """A style declaration piece does not have exactly one colon."""

    def __init__(self, piece: str) -> None:
        super().__init__(f'Could not parse style declaration: {piece!r}')
        self.piece = piece


class UnconsumedPathData(SceneError):
    """Path data was left over after all commands were built."""

    def __init__(self, remaining_count: int, remaining_content: str) -> None:
        super().__init__(
            f'Did not consume all path data '
            f'({remaining_count} items left): {remaining_content!r}'
        )
        self.remaining_count = remaining_count
        self.remaining_content = remaining_content


class IncompleteArgumentGroup(SceneError):
    """Argument count is not a multiple of the command arity."""

    def __init__(
        self, command: str, provided_count: int, required_arity: int
    ) -> None:
        super().__init__(
            f'Path command {command!r} has {provided_count} arguments, '
            f'expected a multiple of {required_arity} '
            f'({provided_count % required_arity} left over)'
        )
        self.command = command
        self.provided_count = provided_count
        self.required_arity = required_arity


class UnsupportedCommand(SceneError):
    """A recognized but unimplemented path command."""

    def __init__(self, letter: str) -> None:
        super().__init__(f'Unsupported path command: {letter!r}')
        self.letter = letter


class UnknownElement(SceneError):
    """An element other than `g` or `path` where a shape is expected."""

    def __init__(self, tag_name: str) -> None:
        super().__init__(f'Unknown shape element: {tag_name!r}')
        self.tag_name = tag_name


class NumericParseFailure(SceneError):
    """A token expected to be numeric is not."""

    def __init__(self, token: str) -> None:
        super().__init__(f'Invalid numeric value: {token!r}')
        self.token = token


class UnexpectedEndOfStream(SceneError):
    """The markup event stream ended inside an open element."""

    def __init__(self, tag_name: str) -> None:
        super().__init__(f'Unexpected end of document inside <{tag_name}>')
        self.tag_name = tag_name
