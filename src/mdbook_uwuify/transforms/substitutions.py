# src/mdbook_uwuify/transforms/substitutions.py

import logging
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from mdbook_uwuify.errors import ConfigError

from .base import ExpansionBound

logger = logging.getLogger(__name__)


class SubstitutionTable(BaseModel):
    name: str
    description: str = ""
    rules: dict[str, str]
    whole_words: bool = True
    case_sensitive: bool = False
    max_expansion: int = 16

    class Config:
        extra = "forbid"


class SubstitutionTransform:
    """Replaces words or phrases according to a ``SubstitutionTable``.

    Longer keys win over shorter ones that share a prefix.
    """

    def __init__(self, table: SubstitutionTable) -> None:
        self.name = table.name
        self.bound = ExpansionBound(multiplier=table.max_expansion)
        self._case_sensitive = table.case_sensitive
        if table.case_sensitive:
            self._rules = dict(table.rules)
        else:
            self._rules = {k.casefold(): v for k, v in table.rules.items()}
        self._pattern = self._compile(table)

    def __call__(self, data: bytes) -> bytes:
        if self._pattern is None:
            return data
        text = self._pattern.sub(self._replace, data.decode("utf-8"))
        return text.encode("utf-8")

    def _replace(self, match: re.Match[str]) -> str:
        found = match.group(0)
        key = found if self._case_sensitive else found.casefold()
        # IGNORECASE can match text whose casefold is not a key (e.g. "s" for "ſ").
        return self._rules.get(key, found)

    @staticmethod
    def _compile(table: SubstitutionTable) -> re.Pattern[str] | None:
        if not table.rules:
            return None
        keys = sorted(table.rules, key=len, reverse=True)
        alternation = "|".join(re.escape(k) for k in keys)
        if table.whole_words:
            alternation = rf"\b(?:{alternation})\b"
        flags = 0 if table.case_sensitive else re.IGNORECASE
        return re.compile(alternation, flags)


class SubstitutionLibrary:
    """Loads every ``*.yaml`` substitution table in a directory."""

    def __init__(self, directory: str | Path) -> None:
        self._tables: dict[str, SubstitutionTable] = {}
        logger.info("Loading substitution tables from directory: %s", directory)
        self._load_all(Path(directory))
        logger.info("Loaded %d substitution tables", len(self._tables))

    def get(self, name: str) -> SubstitutionTable:
        try:
            return self._tables[name]
        except KeyError:
            logger.error("Substitution table not found: %s", name)
            raise KeyError(f"Substitution table '{name}' not found")

    def transforms(self) -> list[SubstitutionTransform]:
        return [SubstitutionTransform(self._tables[name]) for name in self.list()]

    def list(self) -> list[str]:
        return sorted(self._tables)

    def _load_all(self, directory: Path) -> None:
        if not directory.is_dir():
            raise ConfigError(f"Substitutions directory not found: {directory}")
        for file_path in sorted(directory.glob("*.yaml")):
            table = self._load_table(file_path)
            if table.name in self._tables:
                raise ConfigError(
                    f"Duplicate substitution table '{table.name}' in {file_path}"
                )
            self._tables[table.name] = table
            logger.debug(
                "Loaded substitution table: %s (%d rules) from %s",
                table.name,
                len(table.rules),
                file_path,
            )

    def _load_table(self, file_path: Path) -> SubstitutionTable:
        try:
            with open(file_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
            return SubstitutionTable(**(data or {}))
        except (yaml.YAMLError, TypeError, ValidationError) as e:
            raise ConfigError(f"Invalid substitution table {file_path}: {e}") from e
