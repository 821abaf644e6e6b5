"""FormUrlCodec: one configured pair of form-urlencoding operations.

Collaborators that parse or serialize URL-bearing fields usually agree on a
single character encoding and space convention for a whole document.
FormUrlCodec captures those settings once, validates them eagerly, and
exposes them through the parameterizable API so a codec can be recreated
from its parameters.
"""
from __future__ import annotations

import codecs
import logging
from collections.abc import Iterable
from typing import Any

from parameterizable import ParameterizableClass, sort_dict_by_keys

from .form_decoding import decode
from .form_encoding import encode
from .safe_chars import URLENCODER_SAFE_BYTES, SafeByteSet

logger = logging.getLogger(__name__)


class FormUrlCodec(ParameterizableClass):
    """Encoder/decoder pair for application/x-www-form-urlencoded text.

    Attributes (can't be changed after initialization):
        encoding (str): Canonical codec name, e.g. "utf-8".
        safe_bytes (SafeByteSet): Bytes the encoder leaves unescaped.
        blank_as_plus (bool): Encoder writes spaces as '+'.
        plus_as_blank (bool): Decoder reads '+' as a space.
        errors (str): Codec error handler used in both directions.
    """

    encoding: str
    safe_bytes: SafeByteSet
    blank_as_plus: bool
    plus_as_blank: bool
    errors: str

    def __init__(self
                 , encoding: str = "utf-8"
                 , safe_chars: Iterable[int | str] = URLENCODER_SAFE_BYTES
                 , blank_as_plus: bool = True
                 , plus_as_blank: bool = True
                 , errors: str = "replace"):
        """Validate and store codec settings.

        Args:
            encoding (str): Codec name known to Python's codec registry.
            safe_chars (Iterable[int | str]): Bytes or characters the encoder
                leaves unescaped; defaults to URLENCODER_SAFE_BYTES.
            blank_as_plus (bool): Encode spaces as '+' instead of '%20'.
            plus_as_blank (bool): Decode '+' as a space.
            errors (str): Codec error handler, e.g. "replace" or "strict".

        Raises:
            LookupError: If encoding or errors is unknown.
            TypeError: If safe_chars contains elements of an invalid type,
                or a flag is not a bool.
            ValueError: If safe_chars contains values outside 0..255.
        """
        super().__init__()
        if not isinstance(blank_as_plus, bool):
            raise TypeError(f"blank_as_plus must be bool, got {type(blank_as_plus)!r}")
        if not isinstance(plus_as_blank, bool):
            raise TypeError(f"plus_as_blank must be bool, got {type(plus_as_blank)!r}")
        codecs.lookup_error(errors)

        self.encoding = codecs.lookup(encoding).name
        self.safe_bytes = SafeByteSet(safe_chars)
        self.blank_as_plus = blank_as_plus
        self.plus_as_blank = plus_as_blank
        self.errors = errors
        logger.debug("Created %r", self)

    def get_params(self) -> dict[str, Any]:
        """Return configuration parameters of the codec.

        This method is needed to support the Parameterizable API.

        Returns:
            dict[str, Any]: Constructor arguments, sorted by name. Safe bytes
                are reported as a string of characters so the parameters
                stay JSON friendly.
        """
        params = dict(
            encoding=self.encoding,
            safe_chars=self.safe_bytes.chars,
            blank_as_plus=self.blank_as_plus,
            plus_as_blank=self.plus_as_blank,
            errors=self.errors)
        sorted_params = sort_dict_by_keys(params)
        return sorted_params

    def encode(self, content: str | None) -> str | None:
        """Percent-escape content using this codec's settings."""
        return encode(content,
                      encoding=self.encoding,
                      safe_bytes=self.safe_bytes,
                      blank_as_plus=self.blank_as_plus,
                      errors=self.errors)

    def decode(self, content: str | None) -> str | None:
        """Decode percent-escaped content using this codec's settings."""
        return decode(content,
                      encoding=self.encoding,
                      plus_as_blank=self.plus_as_blank,
                      errors=self.errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormUrlCodec):
            return NotImplemented
        return self.get_params() == other.get_params()

    def __hash__(self) -> int:
        return hash(tuple(self.get_params().items()))

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.get_params().items())
        return f"{type(self).__name__}({params})"


DEFAULT_CODEC = FormUrlCodec()
"""UTF-8 codec with the URLEncoder safe table and '+' for spaces."""
