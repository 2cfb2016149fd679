# src/mdbook_uwuify/book/io.py

import logging
from typing import TextIO

from pydantic import TypeAdapter, ValidationError

from mdbook_uwuify.errors import InputDecodeError

from .models import Book, PreprocessorContext

logger = logging.getLogger(__name__)

_PAYLOAD = TypeAdapter(tuple[PreprocessorContext, Book])


def parse_input(stream: TextIO) -> tuple[PreprocessorContext, Book]:
    """Read the ``[context, book]`` pair mdBook writes on stdin.

    Raises:
        InputDecodeError: If the payload is not valid JSON or does not match
            the expected schema.
    """
    data = stream.read()
    logger.debug("Read %d bytes of preprocessor input", len(data))
    try:
        ctx, book = _PAYLOAD.validate_json(data)
    except ValidationError as e:
        raise InputDecodeError(f"Unable to parse the input: {e}") from e
    return ctx, book


def write_output(book: Book, stream: TextIO) -> None:
    stream.write(book.model_dump_json(by_alias=True))
    stream.flush()
