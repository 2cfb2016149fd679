# src/mdbook_uwuify/markdown/dialect.py

import logging
from collections.abc import Iterable

from markdown_it import MarkdownIt
from mdformat.plugins import PARSER_EXTENSIONS
from mdformat.renderer import MDRenderer

from mdbook_uwuify.errors import ConfigError

logger = logging.getLogger(__name__)


def build_markdown(extensions: Iterable[str] = ("tables",)) -> MarkdownIt:
    """Build the CommonMark parser/renderer pair shared by all chapters.

    The parser is markdown-it-py; the renderer is mdformat's ``MDRenderer``,
    which turns the same token stream back into Markdown. Parser extensions
    are mdformat plugins (``mdformat-tables`` provides ``"tables"``).

    Raises:
        ConfigError: If an extension is not installed.
    """
    mdit = MarkdownIt(renderer_cls=MDRenderer)
    mdit.options["mdformat"] = {"number": True, "wrap": "keep"}
    # Keep reference labels on link/image tokens so [text][label] survives.
    mdit.options["store_labels"] = True
    mdit.options["codeformatters"] = {}
    mdit.options["parser_extension"] = []

    for name in extensions:
        try:
            plugin = PARSER_EXTENSIONS[name]
        except KeyError:
            raise ConfigError(f"Unknown markdown extension: {name}") from None
        if plugin not in mdit.options["parser_extension"]:
            mdit.options["parser_extension"].append(plugin)
            plugin.update_mdit(mdit)
            logger.debug("Enabled markdown extension: %s", name)

    return mdit
