# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsers that look at a single leading element."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from chainparse.input.sequences import Input
from chainparse.model.errors import EndOfInput, MatchFailed, Mismatch
from chainparse.model.result import Failure, ParseResult, Success
from chainparse.parsers.base import Parser

# ###############
# Public Interface
# ###############

T = TypeVar("T")
O = TypeVar("O")  # noqa: E741


@dataclass(frozen=True, eq=False)
class LiteralMatch(Parser[T]):
    """Consumes one element equal to ``value`` and produces that element."""

    value: T

    def _parse(self, inp: Input[Any]) -> ParseResult[T]:
        if inp.is_empty():
            return Failure(EndOfInput())
        head = inp.first()
        if head == self.value:
            return Success(head, inp.advance())
        return Failure(Mismatch(expected=repr(self.value), found=repr(head)))

    def describe(self) -> str:
        return f"literal({self.value!r})"


@dataclass(frozen=True, eq=False)
class TokenMatch(Parser[O]):
    """Consumes one element and produces ``fn(element)``.

    The element is rejected when ``fn`` returns None.
    """

    fn: Callable[[Any], O | None]

    def _parse(self, inp: Input[Any]) -> ParseResult[O]:
        if inp.is_empty():
            return Failure(EndOfInput())
        head = inp.first()
        value = self.fn(head)
        if value is None:
            return Failure(MatchFailed(found=repr(head)))
        return Success(value, inp.advance())

    def describe(self) -> str:
        return f"matcher({getattr(self.fn, '__name__', 'fn')})"


@dataclass(frozen=True, eq=False)
class Satisfy(Parser[T]):
    """Consumes one element for which ``predicate`` holds and produces it unchanged."""

    predicate: Callable[[T], bool]

    def _parse(self, inp: Input[Any]) -> ParseResult[T]:
        if inp.is_empty():
            return Failure(EndOfInput())
        head = inp.first()
        if not self.predicate(head):
            return Failure(MatchFailed(found=repr(head)))
        return Success(head, inp.advance())

    def describe(self) -> str:
        return f"satisfy({getattr(self.predicate, '__name__', 'predicate')})"


@dataclass(frozen=True, eq=False)
class AtEnd(Parser[None]):
    """Succeeds with None, consuming nothing, only when the input is exhausted."""

    def _parse(self, inp: Input[Any]) -> ParseResult[None]:
        if inp.is_empty():
            return Success(None, inp)
        return Failure(Mismatch(expected="end of input", found=repr(inp.first())))

    def describe(self) -> str:
        return "end_of_input"


def literal(value: T) -> LiteralMatch[T]:
    """Create a parser that only recognizes *value* as the leading element.

    Example::

        literal(2).parse([2, 3, 4])  # Success(2, [3, 4])
        literal(3).parse([2, 3, 4])  # Failure(Mismatch)
    """
    return LiteralMatch(value)


def matcher(fn: Callable[[Any], O | None]) -> TokenMatch[O]:
    """Create a parser that transforms the leading element with *fn*.

    *fn* returns the output for elements it accepts and None for elements it
    rejects. This is how token-kind dispatch is written::

        number = matcher(lambda tok: tok.value if tok.kind == "NUM" else None)

    Raises:
        TypeError: If *fn* is not callable.
    """
    if not callable(fn):
        raise TypeError(f"matcher() expects a callable, got {type(fn).__name__}")
    return TokenMatch(fn)


def satisfy(predicate: Callable[[T], bool]) -> Satisfy[T]:
    """Create a parser that keeps the leading element if *predicate* holds."""
    if not callable(predicate):
        raise TypeError(f"satisfy() expects a callable, got {type(predicate).__name__}")
    return Satisfy(predicate)


def any_token() -> Satisfy[Any]:
    """Create a parser that consumes any single element."""
    return Satisfy(_always)


def end_of_input() -> AtEnd:
    """Create a parser that only succeeds on an exhausted input."""
    return AtEnd()


# ################
# Implementation
# ################


def _always(_: Any) -> bool:
    return True
