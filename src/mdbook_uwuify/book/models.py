# src/mdbook_uwuify/book/models.py

"""pydantic models of the JSON mdBook exchanges with preprocessors.

Only the fields the preprocessor reads or writes are declared; everything
else (``number``, ``path``, ``__non_exhaustive``, ...) is kept as extra data
and written back untouched.
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, Field

from mdbook_uwuify.errors import ConfigError


class Chapter(BaseModel):
    name: str
    content: str = ""
    sub_items: list["BookItem"] = Field(default_factory=list)

    class Config:
        extra = "allow"


class ChapterItem(BaseModel):
    chapter: Chapter = Field(alias="Chapter")

    class Config:
        extra = "forbid"


class PartTitleItem(BaseModel):
    part_title: str = Field(alias="PartTitle")

    class Config:
        extra = "forbid"


BookItem = Union[ChapterItem, PartTitleItem, Literal["Separator"]]

Chapter.model_rebuild()
ChapterItem.model_rebuild()


class Book(BaseModel):
    sections: list[BookItem]

    class Config:
        extra = "allow"


class PreprocessorContext(BaseModel):
    root: str
    config: dict[str, Any] = Field(default_factory=dict)
    renderer: str
    mdbook_version: str

    class Config:
        extra = "allow"

    def preprocessor_table(self, name: str) -> dict[str, Any]:
        """The ``[preprocessor.<name>]`` table of book.toml, or ``{}``."""
        preprocessors = self.config.get("preprocessor") or {}
        table = preprocessors.get(name) if isinstance(preprocessors, dict) else None
        if table is None:
            return {}
        if not isinstance(table, dict):
            raise ConfigError(f"[preprocessor.{name}] must be a table")
        return table
