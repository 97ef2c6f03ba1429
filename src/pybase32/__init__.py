"""
Python Base32 Codec Library

Strict RFC 4648 base32 encoding and decoding, padded or unpadded, over the
standard alphabet, the "extended hex" alphabet or any caller-supplied set of
32 distinct byte values.

The buffer-level API mirrors how the codec works internally: compute the
output size, allocate a buffer of exactly that size and encode or decode into
it. The `Codecs` bundles, plus the module-level `encode` and `decode`, wrap
those steps for everyday use.

Decoding rejects anything the matching encoder could not have produced,
raising `DecodeError` with `INVALID_CHARACTER` or `INVALID_PADDING`.
"""

from .alphabet import (
    Alphabet,
    STANDARD_ALPHABET,
    EXTENDED_HEX_ALPHABET,
    PAD_CHAR
)

from .encoder import Base32Encoder

from .decoder import (
    Base32Decoder,
    DecodeError
)

from .bundle import (
    Codecs,
    standard,
    standard_no_pad,
    extended_hex,
    extended_hex_no_pad,
    encode,
    decode
)

__version__ = "0.1.0"

__all__ = [
    # Alphabets
    "Alphabet",
    "STANDARD_ALPHABET",
    "EXTENDED_HEX_ALPHABET",
    "PAD_CHAR",

    # Encoding and decoding
    "Base32Encoder",
    "Base32Decoder",
    "DecodeError",

    # Codec bundles
    "Codecs",
    "standard",
    "standard_no_pad",
    "extended_hex",
    "extended_hex_no_pad",
    "encode",
    "decode",
]
