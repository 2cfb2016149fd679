# src/mdbook_uwuify/preprocessor.py

import logging
from pathlib import Path
from time import monotonic

from markdown_it import MarkdownIt

from .book.models import Book, Chapter, PreprocessorContext
from .config import PreprocessorConfig
from .errors import PreprocessorError, SerializationError
from .markdown import build_markdown, decompose, rewrite, serialize, structural_shape
from .observability import names
from .observability.base import MetricsHook, NoOpMetricsHook
from .transforms.base import TextTransform
from .transforms.builtin import UwuTransform
from .transforms.factory import create_transform
from .walker import walk

logger = logging.getLogger(__name__)

NAME = "uwuify"

# mdBook release the JSON schema was written against.
MDBOOK_VERSION = "0.4.40"

# Renderer name reserved for testing the "unsupported" path.
UNSUPPORTED_RENDERER = "not-supported"


class Preprocessor:
    """Rewrites the text of every chapter, leaving Markdown structure intact.

    Per chapter: decompose the body into events, transform TEXT events,
    serialize back to Markdown, and store the result on the chapter.
    """

    def __init__(
        self,
        *,
        name: str = NAME,
        transform: TextTransform | None = None,
        markdown: MarkdownIt | None = None,
        verify_structure: bool = False,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.name = name
        self.transform = transform if transform is not None else UwuTransform()
        self.markdown = markdown if markdown is not None else build_markdown()
        self.verify_structure = verify_structure
        self.metrics_hook = metrics_hook
        logger.debug(
            "Initialized Preprocessor name=%s, transform=%s, verify_structure=%s",
            name,
            self.transform.name,
            verify_structure,
        )

    @classmethod
    def from_context(
        cls,
        ctx: PreprocessorContext,
        *,
        name: str = NAME,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> "Preprocessor":
        """Build a preprocessor from the ``[preprocessor.<name>]`` table.

        Raises:
            ConfigError: If the table is invalid.
        """
        config = PreprocessorConfig.from_table(
            ctx.preprocessor_table(name), root=Path(ctx.root)
        )
        return cls(
            name=name,
            transform=create_transform(config),
            markdown=build_markdown(config.extensions),
            verify_structure=config.verify_structure,
            metrics_hook=metrics_hook,
        )

    def supports_renderer(self, renderer: str) -> bool:
        return renderer != UNSUPPORTED_RENDERER

    def check_version(self, ctx: PreprocessorContext) -> bool:
        """Warn, but carry on, when mdBook's version differs from ours."""
        if ctx.mdbook_version == MDBOOK_VERSION:
            return True
        logger.warning(
            "The %s plugin was built against version %s of mdbook, "
            "but we're being called from version %s",
            self.name,
            MDBOOK_VERSION,
            ctx.mdbook_version,
        )
        return False

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        """Rewrite every chapter of ``book`` in place and return it.

        Raises:
            PreprocessorError: On the first chapter that fails.
        """
        logger.debug("Running %s for renderer %s", self.name, ctx.renderer)
        walk(book.sections, self._process_chapter, name=self.name)
        return book

    def process_body(self, body: str) -> str:
        """Rewrite one Markdown body."""
        events = decompose(body, self.markdown)
        output = serialize(
            rewrite(events, self.transform, self.metrics_hook),
            self.markdown,
            events.env,
        )

        if self.verify_structure:
            expected = structural_shape(events)
            actual = structural_shape(decompose(output, self.markdown))
            if actual != expected:
                raise SerializationError(
                    "Rewritten markdown does not have the structure of the original"
                )
        return output

    def _process_chapter(self, chapter: Chapter) -> None:
        start = monotonic()
        try:
            content = self.process_body(chapter.content)
        except PreprocessorError:
            self.metrics_hook.increment(
                names.CHAPTER_ERRORS_TOTAL, labels={"chapter": chapter.name}
            )
            logger.error("%s: failed on chapter '%s'", self.name, chapter.name)
            raise
        chapter.content = content

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.CHAPTER_DURATION, elapsed_ms, labels={"chapter": chapter.name}
        )
        self.metrics_hook.increment(names.CHAPTERS_PROCESSED_TOTAL)
