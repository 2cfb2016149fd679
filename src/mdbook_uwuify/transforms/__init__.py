# src/mdbook_uwuify/transforms/__init__.py

"""Text transforms applied to the literal text runs of a chapter.

A transform is a pure ``bytes -> bytes`` function with a declared
``ExpansionBound``. The rewriter copies each result into a
``TransformBuffer`` sized from that bound, so an oversized result is an
error rather than a silent truncation.

Example:
    >>> from mdbook_uwuify.transforms import create_transform
    >>> from mdbook_uwuify.config import PreprocessorConfig
    >>>
    >>> transform = create_transform(PreprocessorConfig(transform="uwu"))
    >>> transform(b"hello world")
    b'hewwo wowwd'
"""

from .base import ExpansionBound, TextTransform
from .buffer import TransformBuffer
from .builtin import CaseTransform, IdentityTransform, UwuTransform
from .factory import create_transform
from .registry import TransformRegistry, default_registry
from .substitutions import SubstitutionLibrary, SubstitutionTable, SubstitutionTransform

__all__ = [
    # Factory
    "create_transform",
    "default_registry",
    "TransformRegistry",
    # Protocol
    "TextTransform",
    "ExpansionBound",
    "TransformBuffer",
    # Built-ins
    "CaseTransform",
    "IdentityTransform",
    "UwuTransform",
    # Substitution tables
    "SubstitutionLibrary",
    "SubstitutionTable",
    "SubstitutionTransform",
]
