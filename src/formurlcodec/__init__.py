"""Encoding and decoding of application/x-www-form-urlencoded text.

This package percent-escapes text for URL query strings and form bodies and
decodes it back, including the legacy ``%uXXXX`` escape emitted by some old
clients. Malformed escapes are never rejected; they are copied literally.

Functions:
    encode(): Percent-escape text with a given character encoding; spaces
        become '+' and only alphanumerics and ``-_.*`` stay unescaped.
    decode(): Decode percent-escaped text with a given character encoding;
        '+' becomes a space.
    write_utf8(): Write a raw code point as UTF-8 bytes.
    get_safe_bytes(), is_safe(): Access the default safe-byte table.

Classes:
    SafeByteSet: Immutable set of byte values that are never escaped.
    FormUrlCodec: Parameterizable bundle of codec settings with its own
        encode()/decode() methods.
    InvalidCodePointError: Raised when a code point cannot be written as
        UTF-8.

Constants:
    URLENCODER_SAFE_BYTES: The default safe-byte table.
    DEFAULT_CODEC: A FormUrlCodec with default settings.
"""
import logging

from ._version_info import __version__
from .exceptions import InvalidCodePointError
from .safe_chars import (SafeByteSet, URLENCODER_SAFE_BYTES,
                         URLENCODER_SAFE_CHARS, get_safe_bytes, is_safe)
from .code_point_writer import write_utf8
from .form_decoding import decode
from .form_encoding import encode
from .form_url_codec import FormUrlCodec, DEFAULT_CODEC

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "InvalidCodePointError",
    "SafeByteSet",
    "URLENCODER_SAFE_BYTES",
    "URLENCODER_SAFE_CHARS",
    "get_safe_bytes",
    "is_safe",
    "write_utf8",
    "decode",
    "encode",
    "FormUrlCodec",
    "DEFAULT_CODEC",
]
