"""Tests for alphabets and their reverse lookup tables."""

from __future__ import annotations

import pytest

from convert import (
    BASE64,
    BASE64_URL,
    HEX,
    Alphabet,
    InvalidInputError,
    decode_base64,
    encode_base64,
)
from convert.alphabet import INVALID, TABLE_SIZE


@pytest.mark.parametrize("alphabet", [BASE64, BASE64_URL, HEX])
def test_reverse_table_inverts_symbols(alphabet: Alphabet) -> None:
    """Test reverse[ord(c)] == i for every symbol, INVALID elsewhere."""
    assert len(alphabet.reverse) == TABLE_SIZE

    for index, symbol in enumerate(alphabet.symbols):
        assert alphabet.reverse[ord(symbol)] == index

    mapped = set(alphabet.symbols)
    if alphabet.pad is not None:
        mapped.add(alphabet.pad)
    for code in range(TABLE_SIZE):
        if chr(code) not in mapped:
            assert alphabet.reverse[code] == INVALID


def test_alphabet_sizes() -> None:
    assert len(BASE64.symbols) == 64
    assert len(BASE64_URL.symbols) == 64
    assert len(HEX.symbols) == 16


def test_only_standard_base64_maps_padding() -> None:
    assert BASE64.pad == "="
    assert BASE64.reverse[ord("=")] == 0
    assert BASE64_URL.pad is None
    assert BASE64_URL.reverse[ord("=")] == INVALID
    assert HEX.pad is None


def test_url_alphabet_substitutes_plus_and_slash() -> None:
    assert BASE64.symbols[:62] == BASE64_URL.symbols[:62]
    assert BASE64.symbols[62:] == "+/"
    assert BASE64_URL.symbols[62:] == "-_"


def test_index() -> None:
    assert BASE64.index("A") == 0
    assert BASE64.index("/") == 63
    assert BASE64_URL.index("_") == 63
    assert HEX.index("f") == 15


@pytest.mark.parametrize("char", ["!", "G", "é", "☃"])
def test_index_rejects_unknown_characters(char: str) -> None:
    with pytest.raises(InvalidInputError, match="Bad input string"):
        HEX.index(char)


def test_alphabets_are_immutable() -> None:
    with pytest.raises(AttributeError):
        BASE64.pad = None  # type: ignore[misc]


@pytest.mark.parametrize(
    "symbols,pad",
    [
        ("abc", None),
        (BASE64.symbols[:63], None),
        (BASE64.symbols + "!", None),
        ("0123456789abcdee", None),
        (BASE64.symbols[:63] + "A", None),
        ("0123456789abcdeé", None),
        ("0123456789abcdef", "=="),
        ("0123456789abcdef", "a"),
        ("0123456789abcdef", "é"),
    ],
)
def test_alphabet_rejects_bad_definitions(symbols: str, pad: str | None) -> None:
    with pytest.raises(ValueError):
        Alphabet(symbols, pad=pad)


def test_custom_alphabet_with_shared_core() -> None:
    """Test encoding with a caller-defined alphabet and pad character."""
    dotted = Alphabet(
        "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789._",
        pad="-",
    )
    encoded = encode_base64(bytes([0xFB, 0xFF]), dotted)
    assert encoded == "._8-"
    assert decode_base64(encoded, dotted) == bytes([0xFB, 0xFF])


def test_hex_sized_alphabet_is_accepted() -> None:
    upper = Alphabet("0123456789ABCDEF")
    assert upper.index("F") == 15


@pytest.mark.parametrize("alphabet", [HEX, Alphabet("0123456789ABCDEF", pad="=")])
def test_shared_core_rejects_non_base64_alphabets(alphabet: Alphabet) -> None:
    """Test that the base64 core refuses a 16 symbol alphabet."""
    with pytest.raises(ValueError, match="64 symbol"):
        encode_base64(b"\xff", alphabet)
    with pytest.raises(ValueError, match="64 symbol"):
        decode_base64("ffff", alphabet)
