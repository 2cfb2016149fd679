import pytest
from markdown_it import MarkdownIt

from mdbook_uwuify.errors import ConfigError
from mdbook_uwuify.markdown import build_markdown
from mdbook_uwuify.markdown.decomposer import Event, EventKind, decompose, structural_shape


@pytest.fixture
def mdit() -> MarkdownIt:
    return build_markdown()


def _texts(events) -> list[str]:
    return [e.text for e in events if e.kind is EventKind.TEXT]


class TestDecompose:
    def test_paragraph_events(self, mdit: MarkdownIt) -> None:
        events = list(decompose("Hello **world**", mdit))

        assert [(e.kind, e.token.type) for e in events] == [
            (EventKind.OPEN, "paragraph_open"),
            (EventKind.ENTER, "inline"),
            (EventKind.TEXT, "text"),
            (EventKind.OPEN, "strong_open"),
            (EventKind.TEXT, "text"),
            (EventKind.CLOSE, "strong_close"),
            (EventKind.EXIT, "inline"),
            (EventKind.CLOSE, "paragraph_close"),
        ]
        assert _texts(events) == ["Hello ", "world"]

    def test_code_span_is_not_text(self, mdit: MarkdownIt) -> None:
        events = list(decompose("see `code here`.", mdit))

        code = [e for e in events if e.token.type == "code_inline"]
        assert len(code) == 1
        assert code[0].kind is EventKind.LEAF
        assert "code here" not in "".join(_texts(events))

    def test_fenced_code_is_not_text(self, mdit: MarkdownIt) -> None:
        events = list(decompose("```python\nprint('hi')\n```\n", mdit))

        assert _texts(events) == []
        assert [e.kind for e in events] == [EventKind.LEAF]

    def test_raw_html_is_not_text(self, mdit: MarkdownIt) -> None:
        events = list(decompose('<div class="note">\nhi\n</div>\n', mdit))

        assert _texts(events) == []
        assert events[0].token.type == "html_block"

    def test_link_target_is_not_text(self, mdit: MarkdownIt) -> None:
        events = list(decompose("[click](https://example.com/a_b)", mdit))

        assert _texts(events) == ["click"]
        link = next(e for e in events if e.token.type == "link_open")
        assert link.token.attrs["href"] == "https://example.com/a_b"

    def test_autolink_text_is_leaf(self, mdit: MarkdownIt) -> None:
        events = list(decompose("go <https://example.com> now", mdit))

        assert _texts(events) == ["go ", " now"]

    def test_image_alt_is_text(self, mdit: MarkdownIt) -> None:
        events = list(decompose("![a cat](cat.png)", mdit))

        kinds = [(e.kind, e.token.type) for e in events]
        assert (EventKind.ENTER, "image") in kinds
        assert _texts(events) == ["a cat"]

    def test_image_alt_is_one_text_event(self, mdit: MarkdownIt) -> None:
        events = list(decompose('![alt *em* `c`](a.png "t")', mdit))

        image = [e.kind for e in events if e.token.type == "image"]
        assert image == [EventKind.ENTER, EventKind.EXIT]
        assert _texts(events) == ["alt em c"]
        assert not any(e.token.type == "em_open" for e in events)

    def test_table_cells_are_text(self, mdit: MarkdownIt) -> None:
        events = list(decompose("| a | b |\n| - | - |\n| c | d |\n", mdit))

        assert _texts(events) == ["a", "b", "c", "d"]
        assert any(e.token.type == "table_open" for e in events)

    def test_stream_is_lazy(self, mdit: MarkdownIt) -> None:
        stream = decompose("hello", mdit)

        assert stream.env == {}
        assert stream._tokens is None

    def test_stream_is_restartable(self, mdit: MarkdownIt) -> None:
        stream = decompose("Hello *world*\n\n- one\n- two\n", mdit)

        first = list(stream)
        second = list(stream)

        assert first == second
        assert len(first) > 0

    def test_env_collects_references(self, mdit: MarkdownIt) -> None:
        stream = decompose("[a][ref]\n\n[ref]: https://example.com\n", mdit)
        list(stream)

        assert "REF" in stream.env["references"]

    def test_empty_body(self, mdit: MarkdownIt) -> None:
        assert list(decompose("", mdit)) == []


class TestEvent:
    def test_with_text_replaces_content(self, mdit: MarkdownIt) -> None:
        event = next(e for e in decompose("hello", mdit) if e.kind is EventKind.TEXT)

        replaced = event.with_text("HELLO")

        assert replaced.text == "HELLO"
        assert replaced.kind is EventKind.TEXT
        assert event.text == "hello"

    def test_with_text_on_non_text_raises(self, mdit: MarkdownIt) -> None:
        event = next(iter(decompose("hello", mdit)))

        with pytest.raises(ValueError, match="Cannot replace text of a 'open' event"):
            event.with_text("x")

    def test_event_is_frozen(self, mdit: MarkdownIt) -> None:
        event: Event = next(iter(decompose("hello", mdit)))

        with pytest.raises(AttributeError):
            event.kind = EventKind.TEXT  # type: ignore


class TestStructuralShape:
    def test_ignores_text(self, mdit: MarkdownIt) -> None:
        assert structural_shape(decompose("Hello *world*", mdit)) == structural_shape(
            decompose("Bye *moon*", mdit)
        )

    def test_detects_changed_markup(self, mdit: MarkdownIt) -> None:
        assert structural_shape(decompose("Hello *world*", mdit)) != structural_shape(
            decompose("Hello **world**", mdit)
        )

    def test_detects_changed_code(self, mdit: MarkdownIt) -> None:
        assert structural_shape(decompose("`a`", mdit)) != structural_shape(
            decompose("`b`", mdit)
        )

    def test_indented_code_matches_fence(self, mdit: MarkdownIt) -> None:
        assert structural_shape(decompose("    x = 1\n", mdit)) == structural_shape(
            decompose("```\nx = 1\n```\n", mdit)
        )


class TestBuildMarkdown:
    def test_unknown_extension_raises(self) -> None:
        with pytest.raises(ConfigError, match="Unknown markdown extension: nope"):
            build_markdown(["nope"])

    def test_tables_off_without_extension(self) -> None:
        events = list(decompose("| a | b |\n| - | - |\n", build_markdown(())))

        assert not any(e.token.type == "table_open" for e in events)
