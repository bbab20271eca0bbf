# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input views over token slices and character strings."""

from chainparse.input.sequences import Input, TextSpan, TokenSlice, as_input

__all__ = [
    "Input",
    "TokenSlice",
    "TextSpan",
    "as_input",
]
