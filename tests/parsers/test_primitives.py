# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the single-element parsers."""

import enum
from typing import Any

import pytest

from chainparse.input import TextSpan, TokenSlice
from chainparse.model import EndOfInput, Failure, MatchFailed, Mismatch, Success
from chainparse.parsers import any_token, end_of_input, literal, matcher, satisfy

# ###############
# Test Helpers
# ###############


class Sym(enum.Enum):
    A = "A"
    B = "B"
    C = "C"


def _below_four(value: int) -> int | None:
    return value if value < 4 else None


# ###############
# Literal
# ###############


class TestLiteral:
    def test_matching_literal_consumes_one_element(self) -> None:
        data = [4, 3]
        result = literal(4).parse(data)
        assert result == Success(4, TokenSlice(data, 1))

    @pytest.mark.parametrize(
        "data",
        [[1], [1, 2, 3], [1, 1, 1]],
    )
    def test_output_is_leading_element_and_remainder_is_rest(self, data: list[int]) -> None:
        result = literal(1).parse(data)
        assert isinstance(result, Success)
        assert result.output == data[0]
        assert result.remainder.remaining() == data[1:]

    def test_mismatch(self) -> None:
        result = literal(3).parse([2, 3, 4])
        assert result == Failure(Mismatch(expected="3", found="2"))

    def test_empty_input(self) -> None:
        assert literal(3).parse([]) == Failure(EndOfInput())

    def test_enum_tokens(self) -> None:
        result = literal(Sym.A).parse([Sym.A, Sym.B])
        assert isinstance(result, Success)
        assert result.output is Sym.A

    def test_characters_of_text(self) -> None:
        result = literal("a").parse("abc")
        assert result == Success("a", TextSpan("abc", 1))

    def test_does_not_touch_input_on_failure(self) -> None:
        data = [2, 3]
        literal(3).parse(data)
        assert data == [2, 3]

    def test_parser_is_reusable(self) -> None:
        parser = literal(1)
        first = parser.parse([1, 2])
        second = parser.parse([1, 2])
        assert first == second

    def test_parser_is_callable(self) -> None:
        assert literal(1)([1]) == literal(1).parse([1])


# ###############
# Matcher
# ###############


class TestMatcher:
    def test_accepted_element_is_transformed(self) -> None:
        parser = matcher(lambda t: t * 10 if isinstance(t, int) else None)
        result = parser.parse([4, 40])
        assert isinstance(result, Success)
        assert result.output == 40
        assert result.remainder.remaining() == [40]

    def test_rejected_element_fails(self) -> None:
        result = matcher(_below_four).parse([40])
        assert result == Failure(MatchFailed(found="40"))

    def test_empty_input(self) -> None:
        assert matcher(_below_four).parse([]) == Failure(EndOfInput())

    def test_token_kind_dispatch(self) -> None:
        tokens: list[tuple[str, Any]] = [("NUM", 7), ("PLUS", "+")]
        number = matcher(lambda tok: tok[1] if tok[0] == "NUM" else None)
        result = number.parse(tokens)
        assert isinstance(result, Success)
        assert result.output == 7
        assert isinstance(number.parse(tokens[1:]), Failure)

    def test_falsy_outputs_are_accepted(self) -> None:
        result = matcher(lambda t: 0).parse(["x"])
        assert result == Success(0, TokenSlice(["x"], 1))

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(TypeError, match="matcher\\(\\) expects a callable"):
            matcher(3)  # type: ignore[arg-type]


# ###############
# Satisfy and Any Token
# ###############


class TestSatisfy:
    def test_keeps_element_when_predicate_holds(self) -> None:
        result = satisfy(str.isdigit).parse("7a")
        assert result == Success("7", TextSpan("7a", 1))

    def test_rejects_element_when_predicate_fails(self) -> None:
        assert satisfy(str.isdigit).parse("a7") == Failure(MatchFailed(found="'a'"))

    def test_none_tokens_can_be_kept(self) -> None:
        result = satisfy(lambda t: t is None).parse([None, 1])
        assert isinstance(result, Success)
        assert result.output is None

    def test_empty_input(self) -> None:
        assert satisfy(str.isdigit).parse("") == Failure(EndOfInput())

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(TypeError):
            satisfy("digit")  # type: ignore[arg-type]

    def test_any_token_consumes_anything(self) -> None:
        result = any_token().parse([None, 2])
        assert result == Success(None, TokenSlice([None, 2], 1))

    def test_any_token_fails_at_end(self) -> None:
        assert any_token().parse([]) == Failure(EndOfInput())


# ###############
# End of Input
# ###############


class TestEndOfInput:
    def test_succeeds_on_empty_input(self) -> None:
        result = end_of_input().parse([])
        assert result == Success(None, TokenSlice([]))

    def test_succeeds_on_exhausted_view(self) -> None:
        view = TokenSlice([1], offset=1)
        assert end_of_input().parse(view) == Success(None, view)

    def test_fails_when_input_remains(self) -> None:
        result = end_of_input().parse([1])
        assert result == Failure(Mismatch(expected="end of input", found="1"))
