"""
Base32 decoding into caller-provided buffers

Decoding is strict: input is rejected unless it is exactly what the matching
encoder would have produced for some byte string. That covers symbols outside
the alphabet, impossible input lengths, wrong amounts of padding and nonzero
bits in the unused tail of the last symbol.
"""

from enum import Enum
from typing import Union

try:
    from .alphabet import Alphabet
except ImportError:
    # Handle direct script execution
    from alphabet import Alphabet


# Decoded bytes added by a trailing partial group of n symbols (unpadded input)
_EXTRA_BYTES_FOR_LEFTOVER_SYMBOLS = {0: 0, 2: 1, 4: 2, 5: 3, 7: 4}

# Decoded bytes removed from the upper bound by n trailing pad characters
_BYTES_REMOVED_FOR_PADDING = {0: 0, 1: 1, 3: 2, 4: 3, 6: 4}

# Pad characters required after the data symbols, by leftover bit count
_PADDING_FOR_LEFTOVER_BITS = {2: 6, 4: 4, 1: 3, 3: 1}


class DecodeError(Exception):
    """An error when decoding malformed base32 input"""

    class ErrorType(Enum):
        """Types of decoding errors"""
        INVALID_CHARACTER = "invalid_character"
        INVALID_PADDING = "invalid_padding"

    def __init__(self, error_type: ErrorType, message: str = ""):
        self.error_type = error_type
        super().__init__(f"{error_type.value}: {message}" if message else error_type.value)


def _invalid_padding(message: str = "") -> DecodeError:
    return DecodeError(DecodeError.ErrorType.INVALID_PADDING, message)


def _invalid_character(message: str = "") -> DecodeError:
    return DecodeError(DecodeError.ErrorType.INVALID_CHARACTER, message)


class Base32Decoder:
    """Unpacks 5-bit groups back into bytes using a fixed alphabet and pad policy"""

    def __init__(self, alphabet_chars: Union[bytes, bytearray, str],
                 pad_char: Union[int, bytes, str, None] = None):
        self.alphabet = Alphabet(alphabet_chars, pad_char)
        # e.g. ord('A') => 0, None for any byte not in the alphabet
        self._char_to_index = self.alphabet.inverse_table()
        self._pad_char = self.alphabet.pad_char

    @property
    def pad_char(self):
        return self._pad_char

    def calc_size_upper_bound(self, source_len: int) -> int:
        """
        Return the maximum possible decoded size for a given input length.

        The actual length may be less if the input includes padding.

        Raises:
            DecodeError: INVALID_PADDING if no valid encoding has this length
        """
        groups, leftover = divmod(source_len, 8)
        result = groups * 5
        if self._pad_char is not None:
            if leftover != 0:
                raise _invalid_padding(f"padded input length {source_len} is not a multiple of 8")
        else:
            extra = _EXTRA_BYTES_FOR_LEFTOVER_SYMBOLS.get(leftover)
            if extra is None:
                raise _invalid_padding(f"{leftover} trailing symbols cannot encode whole bytes")
            result += extra
        return result

    def calc_size_for_slice(self, source: bytes) -> int:
        """
        Return the exact decoded size of source.

        Only the length and trailing padding are inspected; the symbols themselves
        are checked by decode().

        Raises:
            DecodeError: INVALID_PADDING if the length or trailing padding is invalid
        """
        result = self.calc_size_upper_bound(len(source))
        if self._pad_char is not None:
            k = 0
            for c in reversed(source):
                if c != self._pad_char:
                    break
                k += 1
            removed = _BYTES_REMOVED_FOR_PADDING.get(k)
            if removed is None:
                raise _invalid_padding(f"{k} trailing pad characters")
            result -= removed
        return result

    def decode(self, dest: Union[bytearray, memoryview], source: bytes) -> None:
        """
        Decode source into dest.

        On error the contents of dest are unspecified.

        Args:
            dest: Writable buffer of exactly calc_size_for_slice(source) bytes
            source: Encoded bytes

        Raises:
            DecodeError: INVALID_CHARACTER for a symbol outside the alphabet,
                INVALID_PADDING for a bad length, padding or trailing bits
            ValueError: If dest does not have the decoded size
        """
        # Also rejects padded input whose length is not a multiple of 8
        expected_len = self.calc_size_for_slice(source)
        if len(dest) != expected_len:
            raise ValueError(f"Destination buffer must be {expected_len} bytes, got {len(dest)}")

        char_to_index = self._char_to_index
        acc = 0
        acc_len = 0
        dest_idx = 0
        padding_idx = None
        for src_idx, c in enumerate(source):
            d = char_to_index[c]
            if d is None:
                if c != self._pad_char:
                    raise _invalid_character(f"{chr(c)!r} at position {src_idx}")
                padding_idx = src_idx
                break
            acc = (acc << 5) | d
            acc_len += 5
            if acc_len >= 8:
                acc_len -= 8
                dest[dest_idx] = acc >> acc_len
                dest_idx += 1
                acc &= (1 << acc_len) - 1

        # Whatever bits did not make a whole byte must be zero
        if acc_len > 4 or acc != 0:
            raise _invalid_padding("nonzero trailing bits")

        if padding_idx is None:
            return

        padding_len = _PADDING_FOR_LEFTOVER_BITS.get(acc_len)
        if padding_len is None:
            raise _invalid_padding(f"padding after {padding_idx} symbols")

        tail = source[padding_idx:]
        for c in tail:
            if c != self._pad_char:
                if char_to_index[c] is None:
                    raise _invalid_character(f"{chr(c)!r} in padding")
                raise _invalid_padding("data symbol after padding")
        if len(tail) != padding_len:
            raise _invalid_padding(f"expected {padding_len} pad characters, got {len(tail)}")
