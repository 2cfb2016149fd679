# src/mdbook_uwuify/markdown/decomposer.py

"""Decompose a Markdown body into a flat stream of events.

markdown-it produces a list of block tokens, some of which (``inline``,
``image``) carry a list of child tokens. The stream flattens that tree:
children appear between an ``ENTER`` and an ``EXIT`` event for their parent.
Image alt text is flattened to a single ``TEXT`` event, since it renders
as plain text.

Only ``TEXT`` events carry human-readable text. Code spans, fenced and
indented code, raw HTML and autolink targets are ``LEAF`` events and are
never handed to a transform.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.token import Token

# Leaves whose content is compared verbatim by structural_shape.
_VERBATIM_LEAVES = frozenset(
    {"code_inline", "fence", "code_block", "html_inline", "html_block"}
)

# Indented code renders as a fence.
_SHAPE_TYPES = {"code_block": "fence"}


class EventKind(str, Enum):
    TEXT = "text"
    OPEN = "open"
    CLOSE = "close"
    LEAF = "leaf"
    ENTER = "enter"
    EXIT = "exit"


@dataclass(frozen=True)
class Event:
    """One unit of a decomposed body. Wraps the markdown-it token."""

    kind: EventKind
    token: Token

    @property
    def text(self) -> str:
        return self.token.content

    def with_text(self, text: str) -> "Event":
        if self.kind is not EventKind.TEXT:
            raise ValueError(f"Cannot replace text of a {self.kind.value!r} event")
        return Event(EventKind.TEXT, self.token.copy(content=text))


class EventStream:
    """Lazy, restartable event sequence for one body.

    The body is parsed on first iteration; each ``iter()`` walks the same
    tokens again. ``env`` holds what the parser collected (link reference
    definitions) and must be handed to the serializer.
    """

    def __init__(self, body: str, mdit: MarkdownIt) -> None:
        self.body = body
        self.env: dict[str, Any] = {}
        self._mdit = mdit
        self._tokens: list[Token] | None = None

    def tokens(self) -> list[Token]:
        if self._tokens is None:
            self._tokens = self._mdit.parse(self.body, self.env)
        return self._tokens

    def __iter__(self) -> Iterator[Event]:
        return _iter_events(self.tokens())


def decompose(body: str, mdit: MarkdownIt) -> EventStream:
    return EventStream(body, mdit)


def _iter_events(tokens: list[Token]) -> Iterator[Event]:
    autolink_depth = 0
    for token in tokens:
        if token.type == "image":
            yield Event(EventKind.ENTER, token)
            yield Event(EventKind.TEXT, Token("text", "", 0, content=_plain_text(token)))
            yield Event(EventKind.EXIT, token)
        elif token.children is not None:
            yield Event(EventKind.ENTER, token)
            yield from _iter_events(token.children)
            yield Event(EventKind.EXIT, token)
        elif token.nesting == 1:
            if token.type == "link_open" and token.markup in ("autolink", "linkify"):
                autolink_depth += 1
            yield Event(EventKind.OPEN, token)
        elif token.nesting == -1:
            if token.type == "link_close" and autolink_depth:
                autolink_depth -= 1
            yield Event(EventKind.CLOSE, token)
        elif token.type == "text" and not autolink_depth:
            yield Event(EventKind.TEXT, token)
        else:
            yield Event(EventKind.LEAF, token)


def _plain_text(token: Token) -> str:
    parts = []
    for child in token.children or []:
        if child.children:
            parts.append(_plain_text(child))
        elif child.type in ("softbreak", "hardbreak"):
            parts.append("\n")
        elif child.type in ("text", "code_inline"):
            parts.append(child.content)
    return "".join(parts)


def structural_shape(events: Iterable[Event]) -> list[tuple[str, str, str, str]]:
    """Non-text skeleton of an event sequence.

    Two bodies are structurally equivalent when their shapes are equal:
    same non-text events in the same order, and identical content for code
    and raw HTML (ignoring trailing newlines). Indented and fenced code
    blocks count as the same kind.
    """
    shape = []
    for event in events:
        if event.kind is EventKind.TEXT:
            continue
        token = event.token
        content = ""
        if event.kind is EventKind.LEAF and token.type in _VERBATIM_LEAVES:
            content = token.content.rstrip("\n")
        token_type = _SHAPE_TYPES.get(token.type, token.type)
        shape.append((event.kind.value, token_type, token.tag, content))
    return shape
