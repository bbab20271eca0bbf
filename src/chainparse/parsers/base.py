# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""The parser abstraction and its chaining surface.

Every primitive and combinator derives from :class:`Parser`. The chaining
methods (``then``, ``or_``, ``map``, ``repeat``, ...) wrap a parser in another
parser, so grammars are written as ordinary expressions::

    pair = literal(1).then(literal(2))
    ones = literal(1).repeat().map(len)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from chainparse.input.sequences import Input, as_input
from chainparse.model.result import ParseResult, Present
from chainparse.parsers.tracing import is_tracing, log

# ###############
# Public Interface
# ###############

O = TypeVar("O")  # noqa: E741
U = TypeVar("U")


class Parser(ABC, Generic[O]):
    """A grammar rule producing values of type ``O``.

    Parsers hold no per-parse state: the same parser may be applied to any
    number of inputs, and applying it twice to the same input yields the same
    result.
    """

    def parse(self, data: Any) -> ParseResult[O]:
        """Parse the front of *data*.

        Args:
            data: An input view, or raw data accepted by
                :func:`~chainparse.input.as_input` (a string or a sequence of
                tokens).

        Returns:
            A :class:`~chainparse.model.Success` holding the output and the
            unconsumed remainder, or a :class:`~chainparse.model.Failure`.
        """
        inp = as_input(data)
        if is_tracing():
            log.debug("trying %s at offset %d", self.describe(), inp.offset)
        return self._parse(inp)

    def __call__(self, data: Any) -> ParseResult[O]:
        return self.parse(data)

    @abstractmethod
    def _parse(self, inp: Input[Any]) -> ParseResult[O]:
        """Parse an input view. Implemented by every concrete parser."""

    def describe(self) -> str:
        """Return a short description used in the parse log."""
        return type(self).__name__

    # ------------------------------------------------------------------
    # Chaining
    # ------------------------------------------------------------------

    def then(self, other: Parser[U]) -> Parser[tuple[O, U]]:
        """Parse ``self`` followed by *other* and pair the outputs."""
        from chainparse.parsers.combinators import Chain

        return Chain(self, other)

    def then_l(self, other: Parser[Any]) -> Parser[O]:
        """Parse ``self`` followed by *other*, keeping only the left output."""
        return self.then(other).map(_left)

    def then_r(self, other: Parser[U]) -> Parser[U]:
        """Parse ``self`` followed by *other*, keeping only the right output."""
        return self.then(other).map(_right)

    def or_(self, other: Parser[U]) -> Parser[O | U]:
        """Try ``self``, and *other* from the same position if it fails."""
        from chainparse.parsers.combinators import Either

        return Either(self, other)

    def __or__(self, other: Parser[U]) -> Parser[O | U]:
        return self.or_(other)

    def map(self, fn: Callable[[O], U]) -> Parser[U]:
        """Transform a successful output with the total function *fn*."""
        from chainparse.parsers.combinators import Map

        return Map(self, fn)

    def repeat(self) -> Parser[list[O]]:
        """Parse ``self`` zero or more times."""
        from chainparse.parsers.combinators import Repeat

        return Repeat(self)

    def repsep(self, sep: Parser[Any], min_reps: int) -> Parser[list[O]]:
        """Parse ``self`` repeatedly, separated by *sep*, at least *min_reps* times."""
        from chainparse.parsers.combinators import RepSep

        return RepSep(self, sep, min_reps)

    def opt(self) -> Parser[Present[O] | None]:
        """Parse ``self`` if possible, producing ``Present(output)`` or None."""
        from chainparse.parsers.combinators import Opt

        return Opt(self)

    def skip(self, noise: Parser[Any]) -> Parser[O]:
        """Parse ``self`` surrounded by any number of *noise* matches."""
        from chainparse.parsers.combinators import skip

        return skip(self, noise)

    def boxed(self, name: str | None = None) -> Boxed[O]:
        """Hide this parser's concrete type behind a :class:`Boxed` handle."""
        return Boxed(self, name)


@dataclass(frozen=True, eq=False)
class Boxed(Parser[O]):
    """A type-erasing handle around any parser.

    Grammar functions can return ``Boxed[O]`` instead of spelling out the
    nested combinator type they build. The wrapped parser is shared, never
    copied.

    Attributes:
        inner: The wrapped parser.
        name: Optional rule name shown in the parse log.
    """

    inner: Parser[O]
    name: str | None = None

    def _parse(self, inp: Input[Any]) -> ParseResult[O]:
        return self.inner.parse(inp)

    def describe(self) -> str:
        return self.name if self.name is not None else self.inner.describe()


# ################
# Implementation
# ################


def _left(pair: tuple[O, Any]) -> O:
    return pair[0]


def _right(pair: tuple[Any, U]) -> U:
    return pair[1]
