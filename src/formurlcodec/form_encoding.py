"""Encode text as application/x-www-form-urlencoded."""
from __future__ import annotations

from collections.abc import Iterable

from .safe_chars import URLENCODER_SAFE_BYTES, SafeByteSet

_ESCAPES = tuple(f"%{b:02X}" for b in range(256))

_BLANK = ord(" ")


def encode(content: str | None,
           encoding: str = "utf-8",
           safe_bytes: SafeByteSet | Iterable[int | str] = URLENCODER_SAFE_BYTES,
           blank_as_plus: bool = True,
           errors: str = "replace") -> str | None:
    """Percent-escape text.

    The text is converted to bytes with ``encoding``. Each safe byte is
    emitted as the character with the same value, a space becomes '+'
    when blank_as_plus is set, and every other byte becomes ``%XY`` with
    uppercase hexadecimal digits.

    Args:
        content: Text to encode. None is passed through.
        encoding: Codec name used to turn the text into bytes.
        safe_bytes: Bytes to leave unescaped. Anything accepted by
            SafeByteSet works; defaults to URLENCODER_SAFE_BYTES.
        blank_as_plus: If True, spaces are written as '+' instead of '%20'.
        errors: Codec error handler for characters ``encoding`` cannot
            represent. The default substitutes the codec's replacement
            character (usually '?').

    Returns:
        str | None: ASCII-only escaped text, or None if content is None.

    Raises:
        LookupError: If encoding or errors is not registered with the
            codec machinery.
    """
    if content is None:
        return None
    safe_bytes = SafeByteSet(safe_bytes)

    pieces = []
    for b in content.encode(encoding, errors):
        if safe_bytes.is_safe(b):
            pieces.append(chr(b))
        elif blank_as_plus and b == _BLANK:
            pieces.append("+")
        else:
            pieces.append(_ESCAPES[b])
    return "".join(pieces)
