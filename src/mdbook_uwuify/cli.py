"""
mdbook-uwuify: an mdBook preprocessor which uwuifies your books.

Usage:
  mdbook-uwuify                      Read [context, book] JSON on stdin,
                                     write the rewritten book on stdout.
  mdbook-uwuify supports <renderer>  Exit 0 if the renderer is supported, 1 if not.

Configure it in book.toml:

  [preprocessor.uwuify]
  transform = "uwu"          # identity, upper, lower, uwu, or a substitution table
  extensions = ["tables"]
  substitutions-dir = "substitutions"
  verify-structure = false
"""

from __future__ import annotations

import argparse
import logging
import sys

from mdbook_uwuify import __version__
from mdbook_uwuify.book import parse_input, write_output
from mdbook_uwuify.errors import PreprocessorError
from mdbook_uwuify.observability import LoggingMetricsHook, NoOpMetricsHook
from mdbook_uwuify.preprocessor import NAME, Preprocessor

logger = logging.getLogger("mdbook_uwuify")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdbook-uwuify",
        description="A mdbook preprocessor which uwuifies your books uwu",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"mdbook-uwuify {__version__}"
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    sub = subparsers.add_parser(
        "supports",
        help="Check whether a renderer is supported by this preprocessor",
    )
    sub.add_argument("renderer", help="Renderer name, e.g. html")

    return parser


def cmd_supports(args: argparse.Namespace) -> int:
    supported = Preprocessor(name=NAME).supports_renderer(args.renderer)
    logger.debug("Renderer %s supported: %s", args.renderer, supported)
    # Signal whether the renderer is supported by exiting with 0 or 1.
    return 0 if supported else 1


def cmd_preprocess(args: argparse.Namespace) -> int:
    try:
        ctx, book = parse_input(sys.stdin)
        Preprocessor(name=NAME).check_version(ctx)
        metrics_hook = LoggingMetricsHook() if args.verbose else NoOpMetricsHook()
        preprocessor = Preprocessor.from_context(
            ctx, name=NAME, metrics_hook=metrics_hook
        )
        processed = preprocessor.run(ctx, book)
    except PreprocessorError as e:
        logger.error("%s", e)
        return 1

    write_output(processed, sys.stdout)
    return 0


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    if args.command == "supports":
        return cmd_supports(args)
    return cmd_preprocess(args)


if __name__ == "__main__":
    sys.exit(main())
