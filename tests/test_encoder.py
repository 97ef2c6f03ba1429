"""
Test cases for base32 encoding, including the RFC 4648 section 10 vectors
"""

import os
import sys
import pytest

# Add the src directory to path to import the pybase32 package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from pybase32 import (
    Base32Encoder, STANDARD_ALPHABET, EXTENDED_HEX_ALPHABET, PAD_CHAR
)


NO_PAD_VECTORS = [
    (b"H", b"JA"),
    (b"He", b"JBSQ"),
    (b"Hel", b"JBSWY"),
    (b"Hell", b"JBSWY3A"),
    (b"Hello", b"JBSWY3DP"),
    (b"Hello ", b"JBSWY3DPEA"),
    (b"Hello s", b"JBSWY3DPEBZQ"),
    (b"Hello si", b"JBSWY3DPEBZWS"),
    (b"Hello sir", b"JBSWY3DPEBZWS4Q"),
    (b"Hello sir!", b"JBSWY3DPEBZWS4RB"),
]

PADDED_VECTORS = [
    (b"H", b"JA======"),
    (b"He", b"JBSQ===="),
    (b"Hel", b"JBSWY==="),
    (b"Hell", b"JBSWY3A="),
    (b"Hello", b"JBSWY3DP"),
    (b"Hello ", b"JBSWY3DPEA======"),
    (b"Hello sir!", b"JBSWY3DPEBZWS4RB"),
]

RFC4648_VECTORS = [
    (b"", b""),
    (b"f", b"MY======"),
    (b"fo", b"MZXQ===="),
    (b"foo", b"MZXW6==="),
    (b"foob", b"MZXW6YQ="),
    (b"fooba", b"MZXW6YTB"),
    (b"foobar", b"MZXW6YTBOI======"),
]

RFC4648_HEX_VECTORS = [
    (b"", b""),
    (b"f", b"CO======"),
    (b"fo", b"CPNG===="),
    (b"foo", b"CPNMU==="),
    (b"foob", b"CPNMUOG="),
    (b"fooba", b"CPNMUOJ1"),
    (b"foobar", b"CPNMUOJ1E8======"),
]


def encode_with(encoder: Base32Encoder, data: bytes) -> bytes:
    size = encoder.calc_size(len(data))
    buf = bytearray(size)
    out = encoder.encode(buf, data)
    assert len(out) == size
    return bytes(out)


def test_encode_no_padding():
    """Test encoding without padding"""
    encoder = Base32Encoder(STANDARD_ALPHABET, None)
    for data, expected in NO_PAD_VECTORS:
        assert encode_with(encoder, data) == expected, f"Failed for {data!r}"


def test_encode_padding():
    """Test encoding with padding fills whole 8 symbol blocks"""
    encoder = Base32Encoder(STANDARD_ALPHABET, PAD_CHAR)
    for data, expected in PADDED_VECTORS:
        assert encode_with(encoder, data) == expected, f"Failed for {data!r}"


def test_rfc4648_vectors():
    """Test the RFC 4648 section 10 test vectors"""
    encoder = Base32Encoder(STANDARD_ALPHABET, PAD_CHAR)
    for data, expected in RFC4648_VECTORS:
        assert encode_with(encoder, data) == expected

    hex_encoder = Base32Encoder(EXTENDED_HEX_ALPHABET, PAD_CHAR)
    for data, expected in RFC4648_HEX_VECTORS:
        assert encode_with(hex_encoder, data) == expected


def test_calc_size():
    """Test output size calculation for both pad policies"""
    padded = Base32Encoder(STANDARD_ALPHABET, PAD_CHAR)
    unpadded = Base32Encoder(STANDARD_ALPHABET, None)

    expected_padded = [0, 8, 8, 8, 8, 8, 16, 16, 16, 16, 16, 24]
    expected_unpadded = [0, 2, 4, 5, 7, 8, 10, 12, 13, 15, 16, 18]
    for n in range(12):
        assert padded.calc_size(n) == expected_padded[n]
        assert unpadded.calc_size(n) == expected_unpadded[n]


def test_calc_size_matches_symbols_written():
    """The unpadded size is the number of data symbols in the padded output"""
    padded = Base32Encoder(STANDARD_ALPHABET, PAD_CHAR)
    unpadded = Base32Encoder(STANDARD_ALPHABET, None)
    for n in range(40):
        data = bytes(range(n))
        symbols = encode_with(padded, data).rstrip(b"=")
        assert len(symbols) == unpadded.calc_size(n)
        assert encode_with(unpadded, data) == symbols


def test_encode_empty():
    """Empty input encodes to empty output"""
    for pad in (PAD_CHAR, None):
        encoder = Base32Encoder(STANDARD_ALPHABET, pad)
        assert encoder.calc_size(0) == 0
        assert encode_with(encoder, b"") == b""


def test_encode_into_larger_buffer():
    """Only the encoded prefix of an oversized buffer is written"""
    encoder = Base32Encoder(STANDARD_ALPHABET, PAD_CHAR)
    buf = bytearray(b"x" * 20)
    out = encoder.encode(buf, b"H")
    assert bytes(out) == b"JA======"
    assert buf[8:] == b"x" * 12


def test_encode_into_memoryview():
    """Writable memoryviews are accepted as destination"""
    encoder = Base32Encoder(STANDARD_ALPHABET, None)
    backing = bytearray(10)
    out = encoder.encode(memoryview(backing)[2:], b"He")
    assert bytes(out) == b"JBSQ"
    assert backing[2:6] == b"JBSQ"


def test_encode_buffer_too_small():
    """A too small destination is a caller error"""
    encoder = Base32Encoder(STANDARD_ALPHABET, PAD_CHAR)
    with pytest.raises(ValueError):
        encoder.encode(bytearray(7), b"H")


def test_custom_alphabet():
    """Encoding with a caller-supplied alphabet and pad character"""
    alphabet = b"abcdefghijklmnopqrstuvwxyz234567"
    encoder = Base32Encoder(alphabet, "#")
    assert encode_with(encoder, b"Hello") == b"jbswy3dp"
    assert encode_with(encoder, b"H") == b"ja######"

    # The 5-bit values 0 through 31, in order
    data = bytes.fromhex("00443214c74254b635cf84653a56d7c675be77df")
    assert encode_with(encoder, data) == alphabet
