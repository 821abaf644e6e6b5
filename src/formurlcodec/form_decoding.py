"""Decode application/x-www-form-urlencoded text.

Besides standard ``%XY`` escapes, the decoder understands the non-standard
``%uXXXX`` escape, where XXXX is a UTF-16 code unit written as four
hexadecimal digits (emitted by some old clients instead of UTF-8
percent-encoding). Malformed escapes are copied to the output literally.
"""
from __future__ import annotations

import logging
import string
import unicodedata

from .code_point_writer import write_utf8

logger = logging.getLogger(__name__)

_HEX_DIGIT_VALUES = {c: int(c, 16) for c in string.hexdigits}

# Fullwidth forms of A-F and a-f.
_FULLWIDTH_HEX_LETTERS = {
    chr(base + i): 10 + i for base in (0xFF21, 0xFF41) for i in range(6)}

_PERCENT = ord("%")
_LEGACY_MARKER = ord("u")
_BLANK = ord(" ")


def _hex_value(c: str) -> int:
    """Return the base-16 value of c, or -1.

    Besides ASCII hex digits, any Unicode decimal digit (e.g. fullwidth or
    Arabic-Indic) and the fullwidth letters A-F / a-f are accepted.
    """
    value = _HEX_DIGIT_VALUES.get(c)
    if value is not None:
        return value
    value = _FULLWIDTH_HEX_LETTERS.get(c)
    if value is not None:
        return value
    return unicodedata.decimal(c, -1)


def decode(content: str | None,
           encoding: str = "utf-8",
           plus_as_blank: bool = True,
           errors: str = "replace") -> str | None:
    """Decode percent-escaped text.

    Escapes are resolved into a byte buffer which is then decoded with
    ``encoding``. Characters outside escapes are copied as their low
    8 bits, so raw non-Latin-1 characters do not survive decoding.

    Args:
        content: Text to decode. None is passed through.
        encoding: Codec name used to turn the decoded bytes into text.
        plus_as_blank: If True, '+' is decoded to a space, as in query
            strings and form bodies; otherwise it is kept as is.
        errors: Codec error handler for bytes ``encoding`` cannot decode.
            The default substitutes U+FFFD.

    Returns:
        str | None: The decoded text, or None if content is None.

    Raises:
        LookupError: If encoding or errors is not registered with the
            codec machinery.
    """
    if content is None:
        return None

    buffer = bytearray()
    malformed = 0
    length = len(content)
    pos = 0
    while pos < length:
        c = content[pos]
        pos += 1
        if c == "%" and length - pos >= 2:
            c1 = content[pos]
            c2 = content[pos + 1]
            pos += 2
            i1 = _hex_value(c1)
            i2 = _hex_value(c2)
            if c1 == "u" and length - pos >= 3:
                i3 = _hex_value(content[pos])
                i4 = _hex_value(content[pos + 1])
                i5 = _hex_value(content[pos + 2])
                pos += 3
                if -1 not in (i2, i3, i4, i5):
                    buffer += write_utf8((i2 << 12) | (i3 << 8) | (i4 << 4) | i5)
                else:
                    # Only '%u' is consumed; the four characters after it
                    # are scanned again as ordinary input.
                    pos -= 4
                    buffer.append(_PERCENT)
                    buffer.append(_LEGACY_MARKER)
                    malformed += 1
            elif i1 != -1 and i2 != -1:
                buffer.append((i1 << 4) | i2)
            else:
                buffer.append(_PERCENT)
                buffer.append(ord(c1) & 0xFF)
                buffer.append(ord(c2) & 0xFF)
                malformed += 1
        elif plus_as_blank and c == "+":
            buffer.append(_BLANK)
        else:
            buffer.append(ord(c) & 0xFF)

    if malformed:
        logger.debug("Copied %d malformed escape(s) through literally", malformed)
    return buffer.decode(encoding, errors)
