"""Custom exception types for the formurlcodec error-handling taxonomy.

Malformed percent-escapes are never errors: the decoder passes them through
literally. The only condition this package raises on its own is:

- ``InvalidCodePointError``: a code point the UTF-8 writer cannot encode
  (negative, or wider than the six-byte form).
"""

from __future__ import annotations


class InvalidCodePointError(ValueError):
    """A code point handed to the UTF-8 writer cannot be encoded.

    Code points built from four hexadecimal digits are always in range,
    so this signals a construction bug rather than bad input.

    Args:
        code_point: The rejected value.

    Attributes:
        code_point: The rejected value.
    """

    def __init__(self, code_point: int) -> None:
        if code_point < 0:
            message = f"Negative code points are not allowed, got {code_point}"
        else:
            message = f"Code point {code_point:#x} does not fit in six UTF-8 bytes"
        super().__init__(message)
        self.code_point = code_point
