# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Combinators that build larger parsers out of smaller ones.

Failure handling follows one rule: a combinator either recovers locally
(alternation tries its next branch, repetition and optionality treat a failure
as "nothing more to consume") or returns the first fatal failure unchanged.
:class:`RepSep` wraps a failing element in :class:`~chainparse.model.RepFailed`.
A :class:`~chainparse.model.RecursionLimit` failure is never recovered from;
it is returned unchanged through every combinator.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from chainparse.input.sequences import Input
from chainparse.model.errors import AllOptionsFailed, NotEnoughReps, RecursionLimit, RepFailed
from chainparse.model.result import Failure, ParseResult, Present, Success
from chainparse.parsers.base import Parser
from chainparse.parsers.tracing import current_recursion_limit, nested_rule

# ###############
# Public Interface
# ###############

O = TypeVar("O")  # noqa: E741
A = TypeVar("A")
B = TypeVar("B")
U = TypeVar("U")


@dataclass(frozen=True, eq=False)
class Chain(Parser[tuple[A, B]]):
    """Parses ``first`` then ``second`` and pairs their outputs.

    If either parser fails, its failure is returned and no partial output is
    kept.
    """

    first: Parser[A]
    second: Parser[B]

    def _parse(self, inp: Input[Any]) -> ParseResult[tuple[A, B]]:
        left = self.first.parse(inp)
        if isinstance(left, Failure):
            return left
        right = self.second.parse(left.remainder)
        if isinstance(right, Failure):
            return right
        return Success((left.output, right.output), right.remainder)

    def describe(self) -> str:
        return f"({self.first.describe()} then {self.second.describe()})"


@dataclass(frozen=True, eq=False)
class Either(Parser[O]):
    """Ordered choice between two parsers.

    ``second`` is only tried when ``first`` fails, and it is always given the
    original input. When both fail, the failure of ``second`` is reported.
    Put the more specific (greedier) alternative first.
    """

    first: Parser[O]
    second: Parser[O]

    def _parse(self, inp: Input[Any]) -> ParseResult[O]:
        result = self.first.parse(inp)
        if isinstance(result, Success) or _aborts(result):
            return result
        return self.second.parse(inp)

    def describe(self) -> str:
        return f"({self.first.describe()} or {self.second.describe()})"


@dataclass(frozen=True, eq=False)
class OneOf(Parser[O]):
    """Ordered choice between any number of parsers.

    Behaves like a chain of :class:`Either` but keeps long option lists flat.
    """

    options: tuple[Parser[O], ...]

    def __post_init__(self) -> None:
        if not self.options:
            raise ValueError("one_of() requires at least one parser")

    def _parse(self, inp: Input[Any]) -> ParseResult[O]:
        for option in self.options:
            result = option.parse(inp)
            if isinstance(result, Success) or _aborts(result):
                return result
        return Failure(AllOptionsFailed(options=len(self.options)))

    def describe(self) -> str:
        return f"one_of({len(self.options)} options)"


@dataclass(frozen=True, eq=False)
class Repeat(Parser[list[O]]):
    """Applies ``parser`` until it fails and collects the outputs.

    Zero matches produce an empty list and the untouched input. A match that
    consumes nothing ends the loop without being collected. A
    :class:`~chainparse.model.RecursionLimit` failure is returned as is.
    """

    parser: Parser[O]

    def _parse(self, inp: Input[Any]) -> ParseResult[list[O]]:
        outputs: list[O] = []
        remain = inp
        while True:
            result = self.parser.parse(remain)
            if _aborts(result):
                return result
            if isinstance(result, Failure) or result.remainder.offset == remain.offset:
                return Success(outputs, remain)
            outputs.append(result.output)
            remain = result.remainder

    def describe(self) -> str:
        return f"repeat({self.parser.describe()})"


@dataclass(frozen=True, eq=False)
class RepSep(Parser[list[O]]):
    """Parses ``rep`` repeatedly, with ``sep`` between consecutive elements.

    A failing ``rep`` fails the whole parser. The loop ends at the first
    failing ``sep``; the remainder is the input just before that separator.

    Attributes:
        rep: The repeated element.
        sep: The separator. Its output is discarded.
        min_reps: Minimum number of elements for the parse to succeed.
    """

    rep: Parser[O]
    sep: Parser[Any]
    min_reps: int

    def __post_init__(self) -> None:
        if self.min_reps < 0:
            raise ValueError(f"min_reps must not be negative, got {self.min_reps}")

    def _parse(self, inp: Input[Any]) -> ParseResult[list[O]]:
        outputs: list[O] = []
        remain = inp
        while True:
            element = self.rep.parse(remain)
            if _aborts(element):
                return element
            if isinstance(element, Failure):
                return Failure(RepFailed(cause=element.error))
            outputs.append(element.output)
            separator = self.sep.parse(element.remainder)
            if _aborts(separator):
                return separator
            if isinstance(separator, Failure):
                if len(outputs) < self.min_reps:
                    return Failure(NotEnoughReps(required=self.min_reps, got=len(outputs)))
                return Success(outputs, element.remainder)
            remain = separator.remainder

    def describe(self) -> str:
        return f"repsep({self.rep.describe()}, {self.sep.describe()}, {self.min_reps})"


@dataclass(frozen=True, eq=False)
class Opt(Parser[Present[O] | None]):
    """Produces ``Present(output)`` if ``parser`` matches, None otherwise.

    On a miss the original input is returned untouched. The only failure
    passed through is a :class:`~chainparse.model.RecursionLimit`.
    """

    parser: Parser[O]

    def _parse(self, inp: Input[Any]) -> ParseResult[Present[O] | None]:
        result = self.parser.parse(inp)
        if _aborts(result):
            return result
        if isinstance(result, Failure):
            return Success(None, inp)
        return Success(Present(result.output), result.remainder)

    def describe(self) -> str:
        return f"opt({self.parser.describe()})"


@dataclass(frozen=True, eq=False)
class Map(Parser[U]):
    """Applies the total function ``fn`` to the output of ``parser``.

    ``fn`` must not fail. A transformation that can reject its input belongs
    in a :func:`~chainparse.parsers.matcher` instead.
    """

    parser: Parser[Any]
    fn: Callable[[Any], U]

    def _parse(self, inp: Input[Any]) -> ParseResult[U]:
        result = self.parser.parse(inp)
        if isinstance(result, Failure):
            return result
        return Success(self.fn(result.output), result.remainder)

    def describe(self) -> str:
        return f"map({self.parser.describe()})"


@dataclass(frozen=True, eq=False)
class Recursive(Parser[O]):
    """Defers building a rule until a parse reaches it.

    ``factory`` is called on every parse and the parser it returns does the
    work. This lets a rule refer to itself without building an infinite tree.
    Left recursion is not detected; set ``max_depth`` (or a recursion limit in
    :class:`~chainparse.settings.ParserSettings`) to turn runaway nesting into
    a :class:`~chainparse.model.RecursionLimit` failure.

    ``max_depth`` bounds how deeply this rule nests within itself, counted per
    factory, so pass the rule function rather than a new lambda on each call.
    The recursion limit of a run bounds the nesting of all recursive rules
    together and only applies to rules without a ``max_depth``.
    """

    factory: Callable[[], Parser[O]]
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if not callable(self.factory):
            raise TypeError(f"recursive() expects a callable, got {type(self.factory).__name__}")
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    def _parse(self, inp: Input[Any]) -> ParseResult[O]:
        with nested_rule(id(self.factory)) as (depth, rule_depth):
            if self.max_depth is not None:
                limit, reached = self.max_depth, rule_depth
            else:
                limit, reached = current_recursion_limit(), depth
            if limit is not None and reached > limit:
                return Failure(RecursionLimit(limit=limit))
            return self.factory().parse(inp)

    def describe(self) -> str:
        return f"recursive({getattr(self.factory, '__name__', 'factory')})"


def one_of(parsers: Iterable[Parser[O]]) -> OneOf[O]:
    """Create an ordered choice over *parsers*.

    Raises:
        ValueError: If *parsers* is empty.
    """
    return OneOf(tuple(parsers))


def repsep(rep: Parser[O], sep: Parser[Any], min_reps: int) -> RepSep[O]:
    """Create a separated repetition of *rep* with at least *min_reps* elements."""
    return RepSep(rep, sep, min_reps)


def opt(parser: Parser[O]) -> Opt[O]:
    """Create a parser that makes *parser* optional.

    Example::

        opt(literal(1)).parse([1])  # Success(Present(1), [])
        opt(literal(1)).parse([2])  # Success(None, [2])
    """
    return Opt(parser)


def recursive(factory: Callable[[], Parser[O]], max_depth: int | None = None) -> Recursive[O]:
    """Create a lazy reference to the rule built by *factory*.

    Example::

        def count_zeros() -> Parser[int]:
            end = literal(1).map(lambda _: 0)
            more = literal(0).then_r(recursive(count_zeros)).map(lambda n: n + 1)
            return end.or_(more)
    """
    return Recursive(factory, max_depth)


def skip(essential: Parser[O], noise: Parser[Any]) -> Parser[O]:
    """Parse *essential* with any amount of *noise* before and after it."""
    return noise.repeat().then_r(essential).then_l(noise.repeat())


# ################
# Implementation
# ################


def _aborts(result: ParseResult[Any]) -> bool:
    """Return True for failures that no combinator may recover from."""
    return isinstance(result, Failure) and isinstance(result.error, RecursionLimit)
