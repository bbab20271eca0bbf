# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""The two-case result returned by every parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, NoReturn, TypeVar, Union

from chainparse.input.sequences import Input
from chainparse.model.errors import ErrorKind, ParseError

# ###############
# Public Interface
# ###############

O = TypeVar("O")  # noqa: E741


@dataclass(frozen=True)
class Success(Generic[O]):
    """A successful parse.

    Attributes:
        output: The value produced by the parser.
        remainder: The suffix of the input that was not consumed.
    """

    output: O
    remainder: Input[Any]

    def __bool__(self) -> Literal[True]:
        return True

    def unwrap(self) -> tuple[O, Input[Any]]:
        """Return the ``(output, remainder)`` pair."""
        return self.output, self.remainder


@dataclass(frozen=True)
class Failure:
    """A failed parse.

    Attributes:
        error: The error kind describing why the parser failed.
    """

    error: ErrorKind

    def __bool__(self) -> Literal[False]:
        return False

    @property
    def message(self) -> str:
        """Human-readable description of the failure."""
        return self.error.message

    def unwrap(self) -> NoReturn:
        """Raise the failure as a :class:`ParseError`."""
        raise ParseError(self.error)


@dataclass(frozen=True)
class Present(Generic[O]):
    """The output of an optional parser that matched.

    Absence is reported as None, so a match is told apart from a miss even
    when the wrapped parser itself produces None.

    Attributes:
        value: The output of the wrapped parser.
    """

    value: O


ParseResult = Union[Success[O], Failure]
