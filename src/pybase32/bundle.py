"""
Matched encoder/decoder pairs and the ready-made RFC4648 presets
"""

import logging
from typing import Union

try:
    from .alphabet import Alphabet, STANDARD_ALPHABET, EXTENDED_HEX_ALPHABET, PAD_CHAR
    from .encoder import Base32Encoder
    from .decoder import Base32Decoder, DecodeError
except ImportError:
    # Handle direct script execution
    from alphabet import Alphabet, STANDARD_ALPHABET, EXTENDED_HEX_ALPHABET, PAD_CHAR
    from encoder import Base32Encoder
    from decoder import Base32Decoder, DecodeError

log = logging.getLogger(__name__)


class Codecs:
    """
    An encoder and a decoder built from the same alphabet and pad policy

    The buffer-level operations live on `encoder` and `decoder`; encode() and
    decode() here allocate the output for you.
    """

    def __init__(self, alphabet_chars: Union[bytes, bytearray, str],
                 pad_char: Union[int, bytes, str, None] = None):
        self.alphabet = Alphabet(alphabet_chars, pad_char)
        self.encoder = Base32Encoder(self.alphabet.chars, self.alphabet.pad_char)
        self.decoder = Base32Decoder(self.alphabet.chars, self.alphabet.pad_char)
        log.debug("Created base32 codecs %r.", self.alphabet)

    @property
    def alphabet_chars(self) -> bytes:
        return self.alphabet.chars

    @property
    def pad_char(self):
        return self.alphabet.pad_char

    def encode(self, data: bytes) -> bytes:
        """Encode data, returning the encoded symbols as bytes"""
        buf = bytearray(self.encoder.calc_size(len(data)))
        self.encoder.encode(buf, data)
        return bytes(buf)

    def decode(self, data: Union[bytes, str]) -> bytes:
        """
        Decode data, which may be bytes or an ASCII string

        Raises:
            DecodeError: If data is not valid base32 for this alphabet
        """
        if isinstance(data, str):
            try:
                data = data.encode('ascii')
            except UnicodeEncodeError as e:
                log.debug("Rejected non-ASCII base32 input at position %d.", e.start)
                raise DecodeError(DecodeError.ErrorType.INVALID_CHARACTER,
                                  f"non-ASCII character at position {e.start}")
        try:
            buf = bytearray(self.decoder.calc_size_for_slice(data))
            self.decoder.decode(buf, data)
        except DecodeError as e:
            log.debug("Rejected base32 input of length %d: %s", len(data), e)
            raise
        return bytes(buf)

    def __repr__(self) -> str:
        return f"Codecs({self.alphabet.chars!r}, pad_char={self.alphabet.pad_char!r})"


# Standard base32 codecs, with padding
standard = Codecs(STANDARD_ALPHABET, PAD_CHAR)

# Standard base32 codecs, without padding
standard_no_pad = Codecs(STANDARD_ALPHABET, None)

# "Extended hex" base32 codecs, with padding
extended_hex = Codecs(EXTENDED_HEX_ALPHABET, PAD_CHAR)

# "Extended hex" base32 codecs, without padding
extended_hex_no_pad = Codecs(EXTENDED_HEX_ALPHABET, None)


def encode(data: bytes, padded: bool = True) -> str:
    """
    Encode bytes into a base32 string using the RFC4648 standard alphabet

    Args:
        data: Bytes to encode
        padded: Whether to pad the output to a multiple of 8 characters

    Returns:
        Base32 encoded string
    """
    codecs = standard if padded else standard_no_pad
    return codecs.encode(data).decode('ascii')


def decode(data: Union[str, bytes], padded: bool = True) -> bytes:
    """
    Decode a base32 string into bytes using the RFC4648 standard alphabet

    Raises:
        DecodeError: If the string is invalid base32
    """
    codecs = standard if padded else standard_no_pad
    return codecs.decode(data)
