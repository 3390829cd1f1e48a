#!/usr/bin/env python3
"""
ALB2JSON LEXER SUITE
--------------------
Quoting, escaping, line completion and chunk-boundary behavior of LogLexer.
"""

import pytest

from alb2json.core.errors import TokenizeError
from alb2json.transcode.lexer import LogLexer, split_line


@pytest.mark.parametrize("text, expected", [
    ('a b c', ["a", "b", "c"]),
    ('"a b" c', ["a b", "c"]),
    ('a\\ b', ["a b"]),
    ('a\\\\b', ["a\\b"]),
    ('say \\"hi\\"', ["say", '"hi"']),
    ('"" x', ["", "x"]),
    ('a  b', ["a", "", "b"]),
    ('a ', ["a", ""]),
    ('pre"quoted part"post', ["prequoted partpost"]),
    ('"GET / HTTP/1.1" -', ["GET / HTTP/1.1", "-"]),
])
def test_split_line(text, expected):
    assert split_line(text) == expected


def test_split_line_trailing_newline_is_line_end():
    assert split_line("a b\n") == ["a", "b"]


def test_empty_input_produces_no_records():
    assert list(LogLexer().tokenize([])) == []
    assert list(LogLexer().tokenize([""])) == []
    assert split_line("") == []


def test_blank_lines_are_skipped_but_counted():
    records = list(LogLexer().tokenize(["a\n\nb\n"]))
    assert records == [(1, ["a"]), (3, ["b"])]


def test_final_line_without_newline_is_flushed():
    records = list(LogLexer().tokenize(["a b\nc d"]))
    assert records == [(1, ["a", "b"]), (2, ["c", "d"])]


def test_escaped_newline_stays_inside_the_field():
    records = list(LogLexer().tokenize(["a\\\nb\nc"]))
    assert records == [(1, ["a\nb"]), (2, ["c"])]


def test_trailing_backslash_escapes_the_implicit_newline():
    assert split_line("abc\\") == ["abc\n"]
    assert list(LogLexer().tokenize(["a b\nc \\"])) == [(1, ["a", "b"]), (2, ["c", "\n"])]


def test_trailing_backslash_inside_open_quote_is_still_fatal():
    with pytest.raises(TokenizeError, match="unterminated quoted field"):
        split_line('"abc\\')


def test_carriage_return_is_an_ordinary_character():
    assert split_line("a\r b\r\n") == ["a\r", "b\r"]


def test_unterminated_quote_is_fatal():
    with pytest.raises(TokenizeError) as exc:
        split_line('"abc')
    assert exc.value.line_no == 1
    assert "unterminated quoted field" in str(exc.value)


def test_unterminated_quote_reports_its_line():
    lexer = LogLexer()
    records = lexer.tokenize(['ok line\nstill "ok"\n"broken\n'])
    assert next(records) == (1, ["ok", "line"])
    assert next(records) == (2, ["still", "ok"])
    with pytest.raises(TokenizeError, match="line 3"):
        next(records)


def test_quote_spanning_chunks():
    whole = list(LogLexer().tokenize(['x "a b" \\"c\n']))
    pieces = list(LogLexer().tokenize(['x "a', ' b', '" \\', '"c', '\n']))
    assert whole == pieces == [(1, ["x", "a b", '"c'])]


def test_state_resets_between_lines():
    lexer = LogLexer()
    assert list(lexer.feed("a b\n")) == [(1, ["a", "b"])]
    assert lexer.state.fields == [] and lexer.state.current == []
    assert list(lexer.feed("c\n")) == [(2, ["c"])]
    assert lexer.line_no == 3
