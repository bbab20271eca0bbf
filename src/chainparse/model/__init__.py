# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parse results and the error taxonomy of failed parses."""

from chainparse.model.errors import (
    AllOptionsFailed,
    EndOfInput,
    ErrorKind,
    ExcessInput,
    MatchFailed,
    Mismatch,
    NotEnoughReps,
    ParseError,
    RecursionLimit,
    RegexMismatch,
    RepFailed,
)
from chainparse.model.result import Failure, ParseResult, Present, Success

__all__ = [
    # Results
    "Success",
    "Failure",
    "ParseResult",
    "Present",
    # Errors
    "ErrorKind",
    "EndOfInput",
    "Mismatch",
    "MatchFailed",
    "RegexMismatch",
    "NotEnoughReps",
    "AllOptionsFailed",
    "RepFailed",
    "RecursionLimit",
    "ExcessInput",
    "ParseError",
]
