# src/mdbook_uwuify/walker.py

import logging
from collections.abc import Callable

from .book.models import BookItem, Chapter, ChapterItem

logger = logging.getLogger(__name__)


def walk(
    items: list[BookItem],
    process: Callable[[Chapter], None],
    *,
    name: str,
) -> None:
    """Visit every chapter depth-first, parents before children.

    Siblings keep their order. Separators and part titles are skipped.
    The first exception raised by ``process`` stops the walk; later chapters
    are neither logged nor touched.

    Uses an explicit stack so nesting depth is not limited by recursion.
    """
    stack = list(reversed(items))
    while stack:
        item = stack.pop()
        if not isinstance(item, ChapterItem):
            continue

        chapter = item.chapter
        logger.info("%s: processing chapter '%s'", name, chapter.name)
        process(chapter)
        stack.extend(reversed(chapter.sub_items))
