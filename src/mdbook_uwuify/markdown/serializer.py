# src/mdbook_uwuify/markdown/serializer.py

import logging
from collections.abc import Iterable, MutableMapping
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.token import Token

from mdbook_uwuify.errors import SerializationError

from .decomposer import Event, EventKind

logger = logging.getLogger(__name__)


def serialize(
    events: Iterable[Event],
    mdit: MarkdownIt,
    env: MutableMapping[str, Any] | None = None,
) -> str:
    """Render an event sequence back to Markdown.

    ``env`` should be the ``EventStream.env`` of the decomposed body so that
    reference-style links keep their definitions.

    Raises:
        SerializationError: If the events are unbalanced or cannot be rendered.
    """
    tokens = _rebuild_tokens(events)
    try:
        return mdit.renderer.render(tokens, mdit.options, env if env is not None else {})
    except Exception as e:
        logger.debug("Renderer failed on %d tokens", len(tokens), exc_info=True)
        raise SerializationError(f"Unable to render markdown: {e}") from e


def _rebuild_tokens(events: Iterable[Event]) -> list[Token]:
    """Turn the flat event sequence back into markdown-it's token tree."""
    levels: list[tuple[Token | None, list[Token], list[Token]]] = [(None, [], [])]

    for event in events:
        parent, siblings, opened = levels[-1]
        token = event.token

        if event.kind is EventKind.ENTER:
            levels.append((token, [], []))
        elif event.kind is EventKind.EXIT:
            if parent is None or parent.type != token.type:
                raise SerializationError(f"Unexpected end of '{token.type}' children")
            if opened:
                raise SerializationError(f"Unclosed '{opened[-1].type}' in '{token.type}'")
            levels.pop()
            levels[-1][1].append(parent.copy(children=siblings))
        elif event.kind is EventKind.OPEN:
            opened.append(token)
            siblings.append(token)
        elif event.kind is EventKind.CLOSE:
            if not opened or _base_type(opened[-1]) != _base_type(token):
                raise SerializationError(f"Unexpected '{token.type}'")
            opened.pop()
            siblings.append(token)
        else:
            siblings.append(token)

    parent, siblings, opened = levels[-1]
    if parent is not None:
        raise SerializationError(f"Unterminated '{parent.type}' children")
    if opened:
        raise SerializationError(f"Unclosed '{opened[-1].type}'")
    return siblings


def _base_type(token: Token) -> str:
    return token.type.removesuffix("_open").removesuffix("_close")
