# src/mdbook_uwuify/config.py

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import ConfigError

logger = logging.getLogger(__name__)

# Keys mdBook itself reads from every [preprocessor.<name>] table.
_MDBOOK_KEYS = frozenset({"command", "before", "after", "renderers", "optional"})


@dataclass(frozen=True)
class PreprocessorConfig:
    """Configuration for the preprocessor.

    Immutable. Explicit. Built from the ``[preprocessor.<name>]`` table of
    ``book.toml``, which mdBook forwards in the context's ``config``.
    """

    transform: str = "uwu"
    extensions: tuple[str, ...] = ("tables",)
    substitutions_dir: Path | None = None
    verify_structure: bool = False

    @classmethod
    def from_table(
        cls, table: dict[str, Any], root: Path | None = None
    ) -> "PreprocessorConfig":
        """Build a config from a book.toml table.

        Raises:
            ConfigError: On unknown keys or values of the wrong type.
        """
        unknown = set(table) - _MDBOOK_KEYS - {
            "transform",
            "extensions",
            "substitutions-dir",
            "verify-structure",
        }
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        transform = table.get("transform", cls.transform)
        if not isinstance(transform, str) or not transform:
            raise ConfigError("'transform' must be a non-empty string")

        extensions = table.get("extensions", list(cls.extensions))
        if not isinstance(extensions, list) or not all(
            isinstance(e, str) for e in extensions
        ):
            raise ConfigError("'extensions' must be a list of strings")

        verify = table.get("verify-structure", cls.verify_structure)
        if not isinstance(verify, bool):
            raise ConfigError("'verify-structure' must be a boolean")

        substitutions_dir = None
        raw_dir = table.get("substitutions-dir")
        if raw_dir is not None:
            if not isinstance(raw_dir, str):
                raise ConfigError("'substitutions-dir' must be a string")
            substitutions_dir = Path(raw_dir)
            if root is not None and not substitutions_dir.is_absolute():
                substitutions_dir = root / substitutions_dir

        config = cls(
            transform=transform,
            extensions=tuple(extensions),
            substitutions_dir=substitutions_dir,
            verify_structure=verify,
        )
        logger.debug("Loaded config: %s", config)
        return config
