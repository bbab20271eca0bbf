# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Composable parser combinators for token sequences and text.

Build a grammar out of primitives and combinators, then parse::

    from chainparse import literal

    parser = literal(1).then(literal(2))
    result = parser.parse([1, 2, 3])
    result.output                  # (1, 2)
    result.remainder.remaining()   # [3]
"""

from chainparse.input import Input, TextSpan, TokenSlice, as_input
from chainparse.model import (
    AllOptionsFailed,
    EndOfInput,
    ErrorKind,
    ExcessInput,
    Failure,
    MatchFailed,
    Mismatch,
    NotEnoughReps,
    ParseError,
    ParseResult,
    Present,
    RecursionLimit,
    RegexMismatch,
    RepFailed,
    Success,
)
from chainparse.parsers import (
    Boxed,
    Parser,
    any_token,
    end_of_input,
    literal,
    matcher,
    one_of,
    opt,
    recursive,
    repsep,
    satisfy,
    skip,
)
from chainparse.runner import parse_all, run
from chainparse.settings import ParserSettings, SettingsError, load_settings
from chainparse.text import capture, rlit, str_lit, whitespace

__all__ = [
    # Input
    "Input",
    "TokenSlice",
    "TextSpan",
    "as_input",
    # Results and errors
    "Success",
    "Failure",
    "ParseResult",
    "Present",
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
    # Parsers
    "Parser",
    "Boxed",
    "literal",
    "matcher",
    "satisfy",
    "any_token",
    "end_of_input",
    "one_of",
    "repsep",
    "opt",
    "recursive",
    "skip",
    # Text
    "rlit",
    "str_lit",
    "capture",
    "whitespace",
    # Running
    "run",
    "parse_all",
    "ParserSettings",
    "load_settings",
    "SettingsError",
]
