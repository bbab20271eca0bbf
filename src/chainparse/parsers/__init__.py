# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Primitive parsers, combinators and the chaining surface."""

from chainparse.parsers.base import Boxed, Parser
from chainparse.parsers.combinators import (
    Chain,
    Either,
    Map,
    OneOf,
    Opt,
    Recursive,
    Repeat,
    RepSep,
    one_of,
    opt,
    recursive,
    repsep,
    skip,
)
from chainparse.parsers.primitives import (
    AtEnd,
    LiteralMatch,
    Satisfy,
    TokenMatch,
    any_token,
    end_of_input,
    literal,
    matcher,
    satisfy,
)

__all__ = [
    # Abstraction
    "Parser",
    "Boxed",
    # Primitives
    "LiteralMatch",
    "TokenMatch",
    "Satisfy",
    "AtEnd",
    "literal",
    "matcher",
    "satisfy",
    "any_token",
    "end_of_input",
    # Combinators
    "Chain",
    "Either",
    "OneOf",
    "Repeat",
    "RepSep",
    "Opt",
    "Map",
    "Recursive",
    "one_of",
    "repsep",
    "opt",
    "recursive",
    "skip",
]
