# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shorthand constructors for writing grammars compactly.

These are conveniences over the combinators in :mod:`chainparse.parsers`;
they add no behaviour of their own.

Example::

    seq(literal("A"), literal("B"), literal("C"))  # produces ("A", ("B", "C"))
    alt(literal(1), literal(2), to=str)            # produces "1" or "2"
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from typing import Any, TypeVar

from chainparse.parsers.base import Parser
from chainparse.parsers.combinators import Chain, Either, Opt, Recursive, Repeat, RepSep
from chainparse.parsers.primitives import TokenMatch

# ###############
# Public Interface
# ###############

O = TypeVar("O")  # noqa: E741


def seq(*parsers: Parser[Any], to: Callable[[Any], Any] | None = None) -> Parser[Any]:
    """Parse *parsers* in order, producing right-nested pairs.

    ``seq(a, b, c)`` produces ``(a, (b, c))``. When *to* is given it is mapped
    over the nested output.

    Raises:
        ValueError: If fewer than two parsers are given.
    """
    if len(parsers) < 2:
        raise ValueError("seq() requires at least two parsers")
    return _finish(_fold_right(Chain, parsers), to)


def alt(*parsers: Parser[Any], to: Callable[[Any], Any] | None = None) -> Parser[Any]:
    """Try *parsers* in order as a right-nested ordered choice.

    Unlike :func:`~chainparse.parsers.one_of`, a total failure reports the
    error of the last alternative.

    Raises:
        ValueError: If fewer than two parsers are given.
    """
    if len(parsers) < 2:
        raise ValueError("alt() requires at least two parsers")
    return _finish(_fold_right(Either, parsers), to)


def rep(parser: Parser[O]) -> Repeat[O]:
    """Parse *parser* zero or more times."""
    return Repeat(parser)


def repsep(rep: Parser[O], sep: Parser[Any], min_reps: int = 0) -> RepSep[O]:
    """Parse *rep* separated by *sep*, requiring *min_reps* elements (default 0)."""
    return RepSep(rep, sep, min_reps)


def opt(parser: Parser[O]) -> Opt[O]:
    """Parse *parser* if possible."""
    return Opt(parser)


def lazy(factory: Callable[[], Parser[O]]) -> Recursive[O]:
    """Defer building a rule until it is reached."""
    return Recursive(factory)


def match_table(table: Mapping[Hashable, O]) -> TokenMatch[O]:
    """Match the leading token against the keys of *table* and produce its value.

    Example::

        match_table({"A": 4, "B": 5}).repeat().parse(["A", "B", "C"])  # [4, 5]

    Tokens that are missing from the table, or are unhashable, are rejected.
    """
    entries = dict(table)

    def lookup(token: Any) -> O | None:
        try:
            return entries.get(token)
        except TypeError:
            return None

    return TokenMatch(lookup)


# ################
# Implementation
# ################


def _fold_right(
    combine: Callable[[Parser[Any], Parser[Any]], Parser[Any]],
    parsers: tuple[Parser[Any], ...],
) -> Parser[Any]:
    """Combine parsers pairwise from the right: ``combine(a, combine(b, c))``."""
    result = parsers[-1]
    for parser in reversed(parsers[:-1]):
        result = combine(parser, result)
    return result


def _finish(parser: Parser[Any], to: Callable[[Any], Any] | None) -> Parser[Any]:
    return parser if to is None else parser.map(to)
