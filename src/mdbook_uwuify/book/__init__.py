from .io import parse_input, write_output
from .models import Book, BookItem, Chapter, ChapterItem, PartTitleItem, PreprocessorContext

__all__ = [
    "Book",
    "BookItem",
    "Chapter",
    "ChapterItem",
    "PartTitleItem",
    "PreprocessorContext",
    "parse_input",
    "write_output",
]
