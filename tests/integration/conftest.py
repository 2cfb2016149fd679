import json

import pytest

from mdbook_uwuify.preprocessor import MDBOOK_VERSION


@pytest.fixture
def context() -> dict:
    """Context object as mdBook sends it to a preprocessor."""
    return {
        "root": "/books/demo",
        "config": {
            "book": {"title": "Demo", "authors": ["someone"], "src": "src"},
            "preprocessor": {
                "uwuify": {"command": "mdbook-uwuify", "transform": "upper"}
            },
        },
        "renderer": "html",
        "mdbook_version": MDBOOK_VERSION,
    }


@pytest.fixture
def book() -> dict:
    """A small book with nesting, a separator and a part title."""
    return {
        "sections": [
            {
                "Chapter": {
                    "name": "Introduction",
                    "content": "# Introduction\n\nSome *text* and `code`.\n",
                    "number": [1],
                    "sub_items": [
                        {
                            "Chapter": {
                                "name": "Setup",
                                "content": "Run this:\n\n```sh\ncargo install mdbook\n```\n",
                                "number": [1, 1],
                                "sub_items": [],
                                "path": "setup.md",
                                "source_path": "setup.md",
                                "parent_names": ["Introduction"],
                            }
                        }
                    ],
                    "path": "intro.md",
                    "source_path": "intro.md",
                    "parent_names": [],
                }
            },
            "Separator",
            {"PartTitle": "Appendix"},
            {
                "Chapter": {
                    "name": "Draft",
                    "content": "",
                    "number": None,
                    "sub_items": [],
                    "path": None,
                    "source_path": None,
                    "parent_names": [],
                }
            },
        ],
        "__non_exhaustive": None,
    }


@pytest.fixture
def payload(context: dict, book: dict) -> str:
    return json.dumps([context, book])
