import random
import re

import pytest

from formurlcodec import URLENCODER_SAFE_CHARS, decode, encode

ESCAPED_TEXT = re.compile(r"(?:[A-Za-z0-9\-_.*+]|%[0-9A-F]{2})*")


def _random_text(rng: random.Random, max_code_point: int, length: int) -> str:
    chars = []
    while len(chars) < length:
        code_point = rng.randrange(max_code_point + 1)
        if 0xD800 <= code_point <= 0xDFFF:
            continue
        chars.append(chr(code_point))
    return "".join(chars)


@pytest.mark.parametrize("encoding, max_code_point", [
    ("utf-8", 0x10FFFF),
    ("utf-16", 0x10FFFF),
    ("utf-32", 0x10FFFF),
    ("latin-1", 0xFF),
    ("ascii", 0x7F),
])
def test_decode_inverts_encode(encoding, max_code_point):
    rng = random.Random(20160301)
    for length in range(40):
        text = _random_text(rng, max_code_point, length)
        encoded = encode(text, encoding)
        assert ESCAPED_TEXT.fullmatch(encoded), encoded
        assert decode(encoded, encoding) == text


@pytest.mark.parametrize("text", [
    "",
    " ",
    "+",
    "%",
    "%41",
    "%u0041",
    "a+b c",
    "100%",
    "q=caf\xe9&lang=fr-CA",
    "東京タワー",
    "\U0001f600\U0001f680",
])
def test_round_trip_of_tricky_strings(text):
    assert decode(encode(text, "utf-8"), "utf-8") == text


@pytest.mark.parametrize("text", [
    "",
    "a",
    URLENCODER_SAFE_CHARS,
    "file-name_v1.2*final",
])
def test_safe_text_is_left_unchanged(text):
    assert encode(text, "utf-8") == text
    assert encode(text, "latin-1") == text
    assert decode(text, "utf-8") == text


def test_round_trip_without_plus_convention():
    text = "a b+c"
    encoded = encode(text, "utf-8", blank_as_plus=False)
    assert encoded == "a%20b%2Bc"
    assert decode(encoded, "utf-8", plus_as_blank=False) == text
