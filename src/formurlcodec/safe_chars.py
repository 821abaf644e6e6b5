"""Safe-byte tables for application/x-www-form-urlencoded output.

A safe byte is emitted by the encoder as the character with the same value
instead of a ``%XY`` escape. This module defines SafeByteSet, an immutable
lookup table over byte values 0..255, and the default table used by
java.net.URLEncoder and browsers: ASCII letters, digits and the marks
``-``, ``_``, ``.``, ``*``.
"""
from __future__ import annotations

import string
from collections.abc import Hashable, Iterable, Iterator, Set
from typing import Any

BYTE_VALUES_COUNT = 256


def _to_byte_value(item: Any) -> int:
    """Convert a table element to a byte value.

    Args:
        item: An int in 0..255, or a single-character string whose code point
            is at most 255.

    Returns:
        int: The byte value.

    Raises:
        TypeError: If item is neither an int nor a str.
        ValueError: If item is out of range or is not a single character.
    """
    if isinstance(item, bool):
        raise TypeError(f"Invalid safe byte type: {type(item)}")
    if isinstance(item, str):
        if len(item) != 1:
            raise ValueError(
                f"Safe characters must be single characters, got {item!r}")
        item = ord(item)
    elif not isinstance(item, int):
        raise TypeError(f"Invalid safe byte type: {type(item)}")
    if not 0 <= item < BYTE_VALUES_COUNT:
        raise ValueError(f"Safe bytes must be in range 0..255, got {item!r}")
    return item


class SafeByteSet(Set, Hashable):
    """An immutable set of byte values that are never percent-escaped.

    Membership is answered from a 256-entry table, so lookups are O(1)
    and instances can be shared between threads without locking.
    """

    _table: tuple[bool, ...]

    def __init__(self, safe: Iterable[int | str] = ()):
        """Build the table from byte values and/or characters.

        Args:
            safe: Ints in 0..255 or single characters with code points
                up to 255. A str is treated as a collection of characters,
                a bytes object as a collection of byte values.

        Raises:
            TypeError: If an element has an invalid type.
            ValueError: If an element is out of range.
        """
        if isinstance(safe, SafeByteSet):
            self._table = safe._table
            return
        table = [False] * BYTE_VALUES_COUNT
        for item in safe:
            table[_to_byte_value(item)] = True
        self._table = tuple(table)

    def is_safe(self, byte_value: int) -> bool:
        """Check whether a byte value is emitted unescaped.

        Args:
            byte_value: Value to check. Anything outside 0..255 is unsafe.

        Returns:
            bool: True if the byte is in the table.
        """
        return 0 <= byte_value < BYTE_VALUES_COUNT and self._table[byte_value]

    @property
    def chars(self) -> str:
        """Safe bytes rendered as a string, in ascending order."""
        return "".join(chr(b) for b in self)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return len(item) == 1 and self.is_safe(ord(item))
        if isinstance(item, int) and not isinstance(item, bool):
            return self.is_safe(item)
        return False

    def __iter__(self) -> Iterator[int]:
        return (b for b, safe in enumerate(self._table) if safe)

    def __len__(self) -> int:
        return sum(self._table)

    def __hash__(self) -> int:
        # Equal frozensets must hash alike.
        return hash(frozenset(self))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeByteSet):
            return self._table == other._table
        return Set.__eq__(self, other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.chars!r})"

    @classmethod
    def _from_iterable(cls, it: Iterable[int | str]) -> SafeByteSet:
        return cls(it)


URLENCODER_SAFE_CHARS = string.ascii_letters + string.digits + "-_.*"

URLENCODER_SAFE_BYTES = SafeByteSet(URLENCODER_SAFE_CHARS)
"""Default table for x-www-form-urlencoded data.

Alphanumerics plus the "mark" characters ``-``, ``_``, ``.``, ``*``, as
emitted unescaped by java.net.URLEncoder and by browsers.
"""


def get_safe_bytes() -> SafeByteSet:
    """Return the default safe-byte table.

    Returns:
        SafeByteSet: The shared, immutable default table.
    """
    return URLENCODER_SAFE_BYTES


def is_safe(byte_value: int,
            safe_bytes: SafeByteSet = URLENCODER_SAFE_BYTES) -> bool:
    """Check whether a byte value is emitted unescaped.

    Args:
        byte_value: Byte value to check.
        safe_bytes: Table to consult; defaults to URLENCODER_SAFE_BYTES.

    Returns:
        bool: True if the byte is safe under the given table.
    """
    return safe_bytes.is_safe(byte_value)
