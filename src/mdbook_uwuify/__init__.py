__version__ = "0.1.0"

# Book model
from .book import Book, Chapter, PreprocessorContext

# Config
from .config import PreprocessorConfig

# Errors
from .errors import (
    BufferBoundError,
    ConfigError,
    InputDecodeError,
    PreprocessorError,
    SerializationError,
    TransformError,
)

# Markdown pipeline
from .markdown import build_markdown, decompose, rewrite, serialize

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Pipeline entry point
from .preprocessor import Preprocessor

# Transforms
from .transforms import ExpansionBound, TextTransform, create_transform

__all__ = [
    "__version__",
    # Book model
    "Book",
    "Chapter",
    "PreprocessorContext",
    # Config
    "PreprocessorConfig",
    # Errors
    "BufferBoundError",
    "ConfigError",
    "InputDecodeError",
    "PreprocessorError",
    "SerializationError",
    "TransformError",
    # Markdown pipeline
    "build_markdown",
    "decompose",
    "rewrite",
    "serialize",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Pipeline entry point
    "Preprocessor",
    # Transforms
    "ExpansionBound",
    "TextTransform",
    "create_transform",
]
