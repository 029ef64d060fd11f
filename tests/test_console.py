"""Tests for the console layer: tokenizer and console implementations."""

from __future__ import annotations

import io

import pytest

from adventure_machine.console import DisplayKind, MemoryConsole, TerminalConsole, tokenize


class TestTokenize:
    """Tests for splitting player input."""

    def test_quoted_span_is_one_token(self):
        assert tokenize('go "south door"') == ["go", "south door"]

    def test_plain_words(self):
        assert tokenize("take gold key") == ["take", "gold", "key"]

    def test_repeated_spaces_produce_no_empty_tokens(self):
        assert tokenize("  look   around ") == ["look", "around"]

    def test_tabs_and_newlines_separate_words(self):
        assert tokenize("go\tsouth\n") == ["go", "south"]

    def test_tab_kept_inside_quotes(self):
        assert tokenize('examine "old\tdoor"') == ["examine", "old\tdoor"]

    def test_quote_inside_word_toggles_span(self):
        assert tokenize('say hel"lo th"ere') == ["say", "hello there"]

    def test_unterminated_quote_keeps_rest(self):
        assert tokenize('ask "old man about it') == ["ask", "old man about it"]

    def test_empty_input(self):
        assert tokenize("") == []

    def test_empty_quotes_produce_nothing(self):
        assert tokenize('""') == []

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ('examine "Door 1"', ["examine", "Door 1"]),
            ('"go" north', ["go", "north"]),
        ],
    )
    def test_quoted_positions(self, text, expected):
        assert tokenize(text) == expected


class TestMemoryConsole:
    """Tests for the recording console."""

    def test_records_messages_and_kinds(self):
        console = MemoryConsole()
        console.display("Hello")
        console.display("Oops", DisplayKind.ERROR)
        assert console.output == [
            ("Hello", DisplayKind.MESSAGE),
            ("Oops", DisplayKind.ERROR),
        ]
        assert console.errors() == ["Oops"]
        assert console.text == "Hello\nOops"

    def test_accepts_kind_strings(self):
        console = MemoryConsole()
        console.display("Title", "title")
        assert console.messages(DisplayKind.TITLE) == ["Title"]

    def test_clear(self):
        console = MemoryConsole()
        console.display("Hello")
        console.clear()
        assert console.output == []


class TestTerminalConsole:
    """Tests for plain-text rendering."""

    def test_writes_to_stream(self):
        stream = io.StringIO()
        TerminalConsole(stream).display("You see a door.", DisplayKind.DESCRIPTION)
        assert stream.getvalue() == "You see a door.\n"

    def test_error_prefix(self):
        console = TerminalConsole(io.StringIO())
        assert console.format("Nope", DisplayKind.ERROR) == "! Nope"

    def test_section_decoration(self):
        console = TerminalConsole(io.StringIO())
        assert console.format("Atrium", DisplayKind.SECTION) == "\n== Atrium =="

    def test_title_underlined(self):
        console = TerminalConsole(io.StringIO())
        assert console.format("Game", DisplayKind.TITLE) == "\nGAME\n===="
