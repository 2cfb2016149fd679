"""Markdown event pipeline: decompose, rewrite text, serialize."""

from .decomposer import Event, EventKind, EventStream, decompose, structural_shape
from .dialect import build_markdown
from .rewriter import rewrite
from .serializer import serialize

__all__ = [
    "Event",
    "EventKind",
    "EventStream",
    "build_markdown",
    "decompose",
    "rewrite",
    "serialize",
    "structural_shape",
]
