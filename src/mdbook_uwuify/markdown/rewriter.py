# src/mdbook_uwuify/markdown/rewriter.py

import logging
from collections.abc import Iterable, Iterator

from mdbook_uwuify.errors import TransformError
from mdbook_uwuify.observability import names
from mdbook_uwuify.observability.base import MetricsHook, NoOpMetricsHook
from mdbook_uwuify.transforms.base import TextTransform
from mdbook_uwuify.transforms.buffer import TransformBuffer

from .decomposer import Event, EventKind

logger = logging.getLogger(__name__)


def rewrite(
    events: Iterable[Event],
    transform: TextTransform,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Iterator[Event]:
    """Apply ``transform`` to every TEXT event; pass everything else through.

    One event out per event in, same order.

    Raises:
        BufferBoundError: If a result exceeds the transform's declared bound.
        TransformError: If the transform fails or returns invalid UTF-8.
    """
    for event in events:
        if event.kind is not EventKind.TEXT:
            yield event
            continue

        payload = event.text.encode("utf-8")
        buffer = TransformBuffer.for_input(len(payload), transform.bound)
        try:
            result = transform(payload)
        except Exception as e:
            raise TransformError(
                f"Transform '{transform.name}' failed on {payload!r}: {e}"
            ) from e
        buffer.write(result)

        try:
            text = buffer.getvalue().decode("utf-8")
        except UnicodeDecodeError as e:
            raise TransformError(
                f"Transform '{transform.name}' produced invalid UTF-8"
            ) from e

        metrics_hook.increment(names.TEXT_EVENTS_TRANSFORMED)
        metrics_hook.increment(names.TEXT_BYTES_IN, len(payload))
        metrics_hook.increment(names.TEXT_BYTES_OUT, len(result))
        yield event.with_text(text)
