# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error kinds reported by failing parsers."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class _ErrorBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class EndOfInput(_ErrorBase):
    """Consumption was attempted on an empty remainder."""

    kind: Literal["end_of_input"] = "end_of_input"

    @property
    def message(self) -> str:
        return "ran out of data"


class Mismatch(_ErrorBase):
    """The leading element did not equal the expected value."""

    kind: Literal["mismatch"] = "mismatch"
    expected: str
    found: str

    @property
    def message(self) -> str:
        return f"literal mismatch: expected {self.expected}, found {self.found}"


class MatchFailed(_ErrorBase):
    """A predicate or transform rejected the leading element."""

    kind: Literal["match_failed"] = "match_failed"
    found: str

    @property
    def message(self) -> str:
        return f"match failed on {self.found}"


class RegexMismatch(_ErrorBase):
    """A pattern did not match at the current position of a text span."""

    kind: Literal["regex_mismatch"] = "regex_mismatch"
    pattern: str

    @property
    def message(self) -> str:
        return f"no match for pattern {self.pattern!r}"


class NotEnoughReps(_ErrorBase):
    """A separated repetition stopped before reaching its minimum count."""

    kind: Literal["not_enough_reps"] = "not_enough_reps"
    required: int
    got: int

    @property
    def message(self) -> str:
        return f"not enough reps: required {self.required}, got {self.got}"


class AllOptionsFailed(_ErrorBase):
    """Every branch of a one-of choice failed."""

    kind: Literal["all_options_failed"] = "all_options_failed"
    options: int

    @property
    def message(self) -> str:
        return f"all {self.options} options failed"


class RepFailed(_ErrorBase):
    """A repeated element failed inside a separated repetition.

    Attributes:
        cause: The error reported by the repeated parser.
    """

    kind: Literal["rep_failed"] = "rep_failed"
    cause: ErrorKind

    @property
    def message(self) -> str:
        return f"error on rep: {self.cause.message}"


class RecursionLimit(_ErrorBase):
    """A recursive rule nested deeper than the configured limit."""

    kind: Literal["recursion_limit"] = "recursion_limit"
    limit: int

    @property
    def message(self) -> str:
        return f"recursion limit of {self.limit} exceeded"


class ExcessInput(_ErrorBase):
    """A parse succeeded but did not consume the whole input."""

    kind: Literal["excess_input"] = "excess_input"
    remaining: int

    @property
    def message(self) -> str:
        return f"{self.remaining} unconsumed element(s) left"


# Any parser error. The `kind` discriminator lets a dumped error be validated
# back into the right model.
ErrorKind = Annotated[
    EndOfInput
    | Mismatch
    | MatchFailed
    | RegexMismatch
    | NotEnoughReps
    | AllOptionsFailed
    | RepFailed
    | RecursionLimit
    | ExcessInput,
    _Field(discriminator="kind"),
]


class ParseError(Exception):
    """Raised when a parse result is required to be a success but is not.

    Attributes:
        error: The error kind describing the failure.
    """

    def __init__(self, error: ErrorKind) -> None:
        super().__init__(error.message)
        self.error = error


# Resolve the forward reference to ErrorKind.
RepFailed.model_rebuild()
