# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Regex-based parsers for character input."""

from chainparse.text.patterns import RegexCapture, RegexLiteral, capture, rlit, str_lit, whitespace

__all__ = [
    "RegexLiteral",
    "RegexCapture",
    "rlit",
    "str_lit",
    "capture",
    "whitespace",
]
