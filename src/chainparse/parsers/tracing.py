# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Per-parse state kept outside of parser objects.

Parsers are immutable and may be shared between threads, so anything that
varies from one parse to the next (the trace flag, the recursion limit and the
current recursion depth) lives in context variables instead.

Enable the parse log with::

    import logging
    logging.basicConfig(level=logging.DEBUG)

and run the parse with ``trace`` set (see :func:`chainparse.runner.run`).
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

# ###############
# Public Interface
# ###############

log = logging.getLogger("chainparse")


def is_tracing() -> bool:
    """Return True if attempts should be written to the parse log."""
    return _TRACE.get()


def current_recursion_limit() -> int | None:
    """Return the recursion limit in effect for the current parse, if any."""
    return _RECURSION_LIMIT.get()


@contextmanager
def tracing(enabled: bool = True) -> Iterator[None]:
    """Enable or disable the parse log for the duration of the block."""
    token = _TRACE.set(enabled)
    try:
        yield
    finally:
        _TRACE.reset(token)


@contextmanager
def recursion_limit(limit: int | None) -> Iterator[None]:
    """Bound the nesting of recursive rules for the duration of the block."""
    token = _RECURSION_LIMIT.set(limit)
    try:
        yield
    finally:
        _RECURSION_LIMIT.reset(token)


@contextmanager
def nested_rule(rule: int) -> Iterator[tuple[int, int]]:
    """Enter one level of recursive rule nesting.

    Args:
        rule: Key identifying the rule being entered.

    Yields:
        The new nesting depth over all rules, and the new nesting depth of
        *rule* on its own.
    """
    depth = _RECURSION_DEPTH.get() + 1
    rule_depths = dict(_RULE_DEPTHS.get({}))
    rule_depths[rule] = rule_depths.get(rule, 0) + 1
    depth_token = _RECURSION_DEPTH.set(depth)
    rules_token = _RULE_DEPTHS.set(rule_depths)
    try:
        yield depth, rule_depths[rule]
    finally:
        _RULE_DEPTHS.reset(rules_token)
        _RECURSION_DEPTH.reset(depth_token)


# ################
# Implementation
# ################

_TRACE: ContextVar[bool] = ContextVar("chainparse_trace", default=False)
_RECURSION_LIMIT: ContextVar[int | None] = ContextVar("chainparse_recursion_limit", default=None)
_RECURSION_DEPTH: ContextVar[int] = ContextVar("chainparse_recursion_depth", default=0)
# Rule key to nesting depth. Replaced, never mutated, on every nested rule.
_RULE_DEPTHS: ContextVar[dict[int, int]] = ContextVar("chainparse_rule_depths")
