# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the regex-based text parsers."""

import re

import pytest

from chainparse.input import TextSpan
from chainparse.model import Failure, RegexMismatch, Success
from chainparse.parsers import literal
from chainparse.text import capture, rlit, str_lit, whitespace

# ###############
# Literals
# ###############


class TestStrLit:
    def test_alternating_literals(self) -> None:
        parser = str_lit("a", 3).or_(str_lit("b", 4)).repeat()
        assert parser.parse("babac") == Success([4, 3, 4, 3], TextSpan("babac", 4))

    def test_remainder_is_text_suffix(self) -> None:
        result = str_lit("let", "LET").parse("let x")
        assert isinstance(result, Success)
        assert str(result.remainder) == " x"

    def test_special_characters_are_literal(self) -> None:
        assert str_lit("a+b", "sum").parse("a+b") == Success("sum", TextSpan("a+b", 3))
        assert isinstance(str_lit("a+b", "sum").parse("aab"), Failure)

    def test_text_is_not_a_regex(self) -> None:
        parser = str_lit("a+", 1)
        assert parser.parse("a+") == Success(1, TextSpan("a+", 2))
        assert parser.parse("aaa") == Failure(RegexMismatch(pattern=re.escape("a+")))

    def test_match_is_anchored_at_offset(self) -> None:
        assert str_lit("b", 1).parse("ab") == Failure(RegexMismatch(pattern="b"))

    def test_continues_from_view_offset(self) -> None:
        span = TextSpan("xxab", offset=2)
        assert str_lit("ab", 1).parse(span) == Success(1, TextSpan("xxab", 4))


class TestRlit:
    def test_pattern_match_produces_value(self) -> None:
        parser = rlit(r"[a-z]+", "word")
        assert parser.parse("hello world") == Success("word", TextSpan("hello world", 5))

    def test_precompiled_pattern(self) -> None:
        parser = rlit(re.compile(r"\d\d"), "two digits")
        assert parser.parse("123") == Success("two digits", TextSpan("123", 2))

    def test_mismatch_reports_pattern(self) -> None:
        result = rlit(r"\d+", 0).parse("abc")
        assert result == Failure(RegexMismatch(pattern=r"\d+"))
        assert result.message == "no match for pattern '\\\\d+'"

    def test_invalid_pattern_rejected(self) -> None:
        with pytest.raises(re.error):
            rlit(r"(", None)

    def test_token_input_rejected(self) -> None:
        with pytest.raises(TypeError, match="require a TextSpan input"):
            rlit(r"a", 1).parse(["a"])


# ###############
# Captures
# ###############


class TestCapture:
    def test_captured_number(self) -> None:
        parser = capture(r"(\d+)", lambda m: int(m.group(1)))
        assert parser.parse("34bah") == Success(34, TextSpan("34bah", 2))

    def test_named_groups(self) -> None:
        parser = capture(r"(?P<key>\w+)=(?P<value>\w+)", lambda m: (m["key"], m["value"]))
        result = parser.parse("name=chain;")
        assert result == Success(("name", "chain"), TextSpan("name=chain;", 10))

    def test_no_match(self) -> None:
        parser = capture(r"(\d+)", lambda m: int(m.group(1)))
        assert parser.parse("bah") == Failure(RegexMismatch(pattern=r"(\d+)"))

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(TypeError, match="capture\\(\\) expects a callable"):
            capture(r"x", "x")  # type: ignore[arg-type]


# ###############
# Whitespace
# ###############


class TestWhitespace:
    def test_consumes_run_of_whitespace(self) -> None:
        assert whitespace().parse(" \t\n x") == Success(None, TextSpan(" \t\n x", 4))

    def test_requires_at_least_one_character(self) -> None:
        assert isinstance(whitespace().parse("x"), Failure)

    def test_as_noise_around_words(self) -> None:
        word = capture(r"[a-z]+", lambda m: m.group(0)).skip(whitespace())
        data = "  one two   three!"
        result = word.repeat().parse(data)
        assert result == Success(["one", "two", "three"], TextSpan(data, 17))

    def test_mixes_with_character_literals(self) -> None:
        parser = literal("(").then_r(str_lit("x", 1).skip(whitespace())).then_l(literal(")"))
        data = "( x )"
        assert parser.parse(data) == Success(1, TextSpan(data, 5))
