"""
Base32 alphabets and their lookup tables

An alphabet is an ordered set of 32 distinct byte values: the symbol at
position i represents the 5-bit value i. An alphabet may also carry a pad
byte which is used to fill an encoded block up to 8 symbols.
"""

import logging
from typing import Optional, Tuple, Union

log = logging.getLogger(__name__)

# RFC4648 "standard" base32 alphabet
STANDARD_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

# RFC4648 "extended hex" base32 alphabet
EXTENDED_HEX_ALPHABET = b"0123456789ABCDEFGHIJKLMNOPQRSTUV"

PAD_CHAR = ord("=")


def _to_bytes(chars: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(chars, str):
        try:
            return chars.encode('ascii')
        except UnicodeEncodeError:
            raise ValueError("Alphabet must only contain ASCII characters")
    if isinstance(chars, (bytes, bytearray)):
        return bytes(chars)
    raise ValueError(f"Alphabet must be bytes or str, not {type(chars).__name__}")


def _to_pad_char(pad_char: Union[int, bytes, str, None]) -> Optional[int]:
    if pad_char is None:
        return None
    if isinstance(pad_char, (bytes, bytearray, str)):
        if len(pad_char) != 1:
            raise ValueError("Pad character must be a single byte")
        pad_char = _to_bytes(pad_char)[0]
    if not isinstance(pad_char, int) or not 0 <= pad_char <= 0xff:
        raise ValueError(f"Pad character must be a byte value, got {pad_char!r}")
    return pad_char


class Alphabet:
    """
    A validated base32 alphabet with an optional pad character.

    Construction fails with ValueError if the alphabet is not exactly 32 bytes,
    if any byte repeats or if the pad character is itself part of the alphabet.
    These checks run once; an Alphabet is never modified afterwards.
    """

    def __init__(self, alphabet_chars: Union[bytes, bytearray, str],
                 pad_char: Union[int, bytes, str, None] = None):
        chars = _to_bytes(alphabet_chars)
        pad = _to_pad_char(pad_char)

        if len(chars) != 32:
            raise ValueError(f"Alphabet must have exactly 32 characters, got {len(chars)}")

        seen = [False] * 256
        for c in chars:
            if seen[c]:
                raise ValueError(f"Duplicate character in alphabet: {chr(c)!r}")
            if pad is not None and c == pad:
                raise ValueError(f"Pad character {chr(c)!r} is part of the alphabet")
            seen[c] = True

        self._chars = chars
        self._pad_char = pad

        log.debug("Built base32 alphabet %r (pad=%r).", chars,
                  None if pad is None else chr(pad))

    @property
    def chars(self) -> bytes:
        """The symbol for each 5-bit value, indexed 0 to 31"""
        return self._chars

    @property
    def pad_char(self) -> Optional[int]:
        """The pad byte, or None when the alphabet is unpadded"""
        return self._pad_char

    def inverse_table(self) -> Tuple[Optional[int], ...]:
        """
        Build the decoding table.

        Returns a 256 entry tuple mapping each byte value to its 5-bit value,
        with None for every byte that is not in the alphabet.
        """
        table = [None] * 256
        for i, c in enumerate(self._chars):
            table[c] = i
        return tuple(table)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars and self._pad_char == other._pad_char

    def __hash__(self) -> int:
        return hash((self._chars, self._pad_char))

    def __repr__(self) -> str:
        return f"Alphabet({self._chars!r}, pad_char={self._pad_char!r})"
