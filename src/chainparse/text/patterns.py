# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Regex-based parsers over text spans.

Each parser matches a compiled pattern anchored at the current offset of a
:class:`~chainparse.input.TextSpan` and consumes exactly the matched text.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from chainparse.input.sequences import Input, TextSpan
from chainparse.model.errors import RegexMismatch
from chainparse.model.result import Failure, ParseResult, Success
from chainparse.parsers.base import Parser

# ###############
# Public Interface
# ###############

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class RegexLiteral(Parser[T]):
    """Matches ``regex`` and produces the constant ``value``."""

    regex: re.Pattern[str]
    value: T

    def _parse(self, inp: Input[Any]) -> ParseResult[T]:
        span = _require_text(inp)
        match = self.regex.match(span.source, span.offset)
        if match is None:
            return Failure(RegexMismatch(pattern=self.regex.pattern))
        return Success(self.value, span.advance(match.end() - span.offset))

    def describe(self) -> str:
        return f"rlit({self.regex.pattern!r})"


@dataclass(frozen=True, eq=False)
class RegexCapture(Parser[T]):
    """Matches ``regex`` and produces ``fn(match)``."""

    regex: re.Pattern[str]
    fn: Callable[[re.Match[str]], T]

    def _parse(self, inp: Input[Any]) -> ParseResult[T]:
        span = _require_text(inp)
        match = self.regex.match(span.source, span.offset)
        if match is None:
            return Failure(RegexMismatch(pattern=self.regex.pattern))
        return Success(self.fn(match), span.advance(match.end() - span.offset))

    def describe(self) -> str:
        return f"capture({self.regex.pattern!r})"


def rlit(regex: str | re.Pattern[str], value: T) -> RegexLiteral[T]:
    """Create a parser that matches *regex* and produces *value*.

    Raises:
        re.error: If *regex* is not a valid pattern.
    """
    return RegexLiteral(re.compile(regex), value)


def str_lit(text: str, value: T) -> RegexLiteral[T]:
    """Create a parser that matches the exact *text* and produces *value*."""
    return RegexLiteral(re.compile(re.escape(text)), value)


def capture(regex: str | re.Pattern[str], fn: Callable[[re.Match[str]], T]) -> RegexCapture[T]:
    """Create a parser that matches *regex* and produces ``fn(match)``.

    Example::

        number = capture(r"(\\d+)", lambda m: int(m.group(1)))
        number.parse("34bah")  # Success(34, "bah")
    """
    if not callable(fn):
        raise TypeError(f"capture() expects a callable, got {type(fn).__name__}")
    return RegexCapture(re.compile(regex), fn)


def whitespace() -> RegexLiteral[None]:
    """Create a parser for a run of whitespace, for use as noise with ``skip``."""
    return RegexLiteral(_WHITESPACE, None)


# ################
# Implementation
# ################

_WHITESPACE = re.compile(r"\s+")


def _require_text(inp: Input[Any]) -> TextSpan:
    """Return *inp* as a text span, rejecting token slices."""
    if not isinstance(inp, TextSpan):
        raise TypeError(f"Pattern parsers require a TextSpan input, got {type(inp).__name__}")
    return inp
