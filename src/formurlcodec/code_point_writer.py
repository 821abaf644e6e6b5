"""Write a raw code point as UTF-8 bytes.

The legacy ``%uXXXX`` escape carries a 16-bit value which the decoder must
turn into bytes before the whole buffer is decoded with the caller's codec.
``str.encode`` refuses surrogates, so the bytes are assembled by hand.
"""
from __future__ import annotations

from .exceptions import InvalidCodePointError

_SINGLE_BYTE_LIMIT = 0x80
_CONTINUATION_PREFIX = 0x80
_CONTINUATION_PAYLOAD_BITS = 6
_CONTINUATION_PAYLOAD_MASK = 0x3F
_TWO_BYTE_LEAD_PREFIX = 0xC0
_TWO_BYTE_LEAD_MASK = 0x1F

MAX_ENCODABLE_CODE_POINT = 0x7FFFFFFF


def write_utf8(code_point: int) -> bytes:
    """Encode a non-negative code point in the UTF-8 multi-byte scheme.

    Continuation bytes are produced least-significant first; every extra
    continuation byte narrows the lead byte's payload by one bit. Values
    above U+10FFFF (up to the 31-bit limit of the six-byte form) and
    surrogates are written with the same scheme.

    Args:
        code_point: Value to encode.

    Returns:
        bytes: The encoded sequence, most-significant byte first.

    Raises:
        InvalidCodePointError: If code_point is negative or needs more
            than six bytes.
    """
    if not 0 <= code_point <= MAX_ENCODABLE_CODE_POINT:
        raise InvalidCodePointError(code_point)
    if code_point < _SINGLE_BYTE_LIMIT:
        return bytes((code_point,))

    reversed_bytes = bytearray()
    lead_prefix = _TWO_BYTE_LEAD_PREFIX
    lead_mask = _TWO_BYTE_LEAD_MASK
    while True:
        reversed_bytes.append(
            _CONTINUATION_PREFIX | (code_point & _CONTINUATION_PAYLOAD_MASK))
        code_point >>= _CONTINUATION_PAYLOAD_BITS
        if code_point & ~lead_mask == 0:
            reversed_bytes.append(lead_prefix | code_point)
            break
        lead_prefix = 0x80 | (lead_prefix >> 1)
        lead_mask >>= 1
    reversed_bytes.reverse()
    return bytes(reversed_bytes)
