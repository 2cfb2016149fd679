# src/mdbook_uwuify/errors.py

"""Error taxonomy for the preprocessor.

Every fatal condition is a ``PreprocessorError``. The CLI reports it on
stderr and exits non-zero; nothing is written to stdout.
"""


class PreprocessorError(Exception):
    """Base class for all fatal preprocessor errors."""


class InputDecodeError(PreprocessorError):
    """The ``[context, book]`` payload on stdin is malformed."""


class ConfigError(PreprocessorError):
    """The ``[preprocessor.<name>]`` table is invalid."""


class TransformError(PreprocessorError):
    """The text transform failed or produced invalid UTF-8."""


class BufferBoundError(TransformError):
    """A transformed text span exceeded its declared capacity."""

    def __init__(self, capacity: int, size: int) -> None:
        super().__init__(
            f"transformed span of {size} bytes exceeds buffer capacity of {capacity} bytes"
        )
        self.capacity = capacity
        self.size = size


class SerializationError(PreprocessorError):
    """An event sequence could not be rendered back to Markdown."""
