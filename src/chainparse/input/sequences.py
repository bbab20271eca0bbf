# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input views consumed by parsers.

A parser never owns its input. It receives a view (a source object plus an
offset) and hands back a view of whatever it did not consume. Advancing a view
creates a new view over the same source, so no element data is ever copied.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

# ###############
# Public Interface
# ###############

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Input(Protocol[T_co]):
    """A finite, randomly sliceable view over a token sequence."""

    @property
    def offset(self) -> int: ...

    def __len__(self) -> int: ...

    def is_empty(self) -> bool: ...

    def first(self) -> T_co: ...

    def advance(self, count: int = 1) -> Input[T_co]: ...


@dataclass(frozen=True)
class TokenSlice(Generic[T]):
    """A view over a sequence of discrete tokens.

    Attributes:
        source: The full token sequence. Shared, never copied.
        offset: Index of the first element still visible through this view.
    """

    source: Sequence[T]
    offset: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.offset <= len(self.source):
            raise ValueError(f"Offset {self.offset} out of range for a sequence of length {len(self.source)}")

    def __len__(self) -> int:
        return len(self.source) - self.offset

    def __iter__(self) -> Iterator[T]:
        for index in range(self.offset, len(self.source)):
            yield self.source[index]

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self):
            raise IndexError(index)
        return self.source[self.offset + index]

    def __repr__(self) -> str:
        return f"TokenSlice({list(self)!r}, offset={self.offset})"

    def is_empty(self) -> bool:
        """Return True if no elements are left."""
        return self.offset >= len(self.source)

    def first(self) -> T:
        """Return the leading element.

        Raises:
            IndexError: If the view is empty.
        """
        if self.is_empty():
            raise IndexError("first() on an empty TokenSlice")
        return self.source[self.offset]

    def advance(self, count: int = 1) -> TokenSlice[T]:
        """Return the suffix view starting *count* elements further on."""
        return TokenSlice(self.source, self.offset + count)

    def remaining(self) -> list[T]:
        """Return a copy of the elements still visible through this view."""
        return list(self)


@dataclass(frozen=True)
class TextSpan:
    """A view over a character string.

    Attributes:
        source: The full text. Shared, never copied.
        offset: Index of the first character still visible through this view.
    """

    source: str
    offset: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.offset <= len(self.source):
            raise ValueError(f"Offset {self.offset} out of range for a string of length {len(self.source)}")

    def __len__(self) -> int:
        return len(self.source) - self.offset

    def __iter__(self) -> Iterator[str]:
        for index in range(self.offset, len(self.source)):
            yield self.source[index]

    def __str__(self) -> str:
        return self.source[self.offset :]

    def __repr__(self) -> str:
        return f"TextSpan({str(self)!r}, offset={self.offset})"

    def is_empty(self) -> bool:
        """Return True if no characters are left."""
        return self.offset >= len(self.source)

    def first(self) -> str:
        """Return the leading character.

        Raises:
            IndexError: If the span is empty.
        """
        if self.is_empty():
            raise IndexError("first() on an empty TextSpan")
        return self.source[self.offset]

    def advance(self, count: int = 1) -> TextSpan:
        """Return the suffix span starting *count* characters further on."""
        return TextSpan(self.source, self.offset + count)

    def remaining(self) -> str:
        """Return the text still visible through this span."""
        return str(self)


def as_input(data: Any) -> Input[Any]:
    """Wrap raw data in the matching input view.

    Views are returned unchanged, strings become a :class:`TextSpan` and any
    other sequence becomes a :class:`TokenSlice`.

    Raises:
        TypeError: If *data* is neither a view nor a sequence.
    """
    if isinstance(data, (TokenSlice, TextSpan)):
        return data
    if isinstance(data, str):
        return TextSpan(data)
    if isinstance(data, Sequence):
        return TokenSlice(data)
    if isinstance(data, Input):
        return data
    raise TypeError(f"Cannot parse input of type {type(data).__name__}")
