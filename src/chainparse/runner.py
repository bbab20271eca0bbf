# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry points that run a grammar under a set of parser settings."""

from typing import Any, TypeVar

from chainparse.model.errors import ExcessInput, ParseError
from chainparse.model.result import Failure, ParseResult
from chainparse.parsers.base import Parser
from chainparse.parsers.tracing import log, recursion_limit, tracing
from chainparse.settings import ParserSettings

# ###############
# Public Interface
# ###############

O = TypeVar("O")  # noqa: E741


def run(parser: Parser[O], data: Any, settings: ParserSettings | None = None) -> ParseResult[O]:
    """Parse *data* with *parser* under *settings*.

    The recursion limit and the trace flag only apply to this call; other
    parses running at the same time are unaffected.

    Args:
        parser: The root rule of the grammar.
        data: An input view, a string, or a sequence of tokens.
        settings: Options for this run. Defaults to ``ParserSettings()``.

    Returns:
        The parse result. With ``require_complete`` set, a success that leaves
        input behind is turned into a :class:`~chainparse.model.ExcessInput`
        failure.
    """
    if settings is None:
        settings = ParserSettings()

    with tracing(settings.trace), recursion_limit(settings.max_recursion_depth):
        result = parser.parse(data)

    if isinstance(result, Failure):
        if settings.trace:
            log.debug("parse failed: %s", result.message)
        return result
    if settings.require_complete and not result.remainder.is_empty():
        return Failure(ExcessInput(remaining=len(result.remainder)))
    return result


def parse_all(parser: Parser[O], data: Any, settings: ParserSettings | None = None) -> O:
    """Parse the whole of *data* and return the output.

    Unlike :func:`run`, leftover input is always an error, whatever the
    ``require_complete`` setting says.

    Raises:
        ParseError: If the parse fails or does not consume all of *data*.
    """
    base = settings if settings is not None else ParserSettings()
    result = run(parser, data, base.model_copy(update={"require_complete": True}))
    if isinstance(result, Failure):
        raise ParseError(result.error)
    return result.output
