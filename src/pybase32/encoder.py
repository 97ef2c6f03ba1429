"""
Base32 encoding into caller-provided buffers
"""

from typing import Union

try:
    from .alphabet import Alphabet
except ImportError:
    # Handle direct script execution
    from alphabet import Alphabet


class Base32Encoder:
    """Packs bytes into 5-bit groups using a fixed alphabet and pad policy"""

    def __init__(self, alphabet_chars: Union[bytes, bytearray, str],
                 pad_char: Union[int, bytes, str, None] = None):
        self.alphabet = Alphabet(alphabet_chars, pad_char)
        self._chars = self.alphabet.chars
        self._pad_char = self.alphabet.pad_char

    @property
    def pad_char(self):
        return self._pad_char

    def calc_size(self, source_len: int) -> int:
        """Compute the encoded length of source_len input bytes"""
        if self._pad_char is not None:
            # Every 5 bytes (40 bits) make a full block of 8 symbols
            return (source_len + 4) // 5 * 8
        # 8 bits per byte, 5 bits per symbol, rounded up
        return (source_len * 8 + 4) // 5

    def encode(self, dest: Union[bytearray, memoryview], source: bytes) -> memoryview:
        """
        Encode source into dest.

        Args:
            dest: Writable buffer of at least calc_size(len(source)) bytes
            source: Bytes to encode

        Returns:
            A memoryview over the part of dest holding the encoded data

        Raises:
            ValueError: If dest is too small
        """
        out_len = self.calc_size(len(source))
        if len(dest) < out_len:
            raise ValueError(f"Destination buffer too small: {len(dest)} < {out_len}")

        chars = self._chars
        acc = 0
        acc_len = 0
        out_idx = 0
        for v in source:
            acc = (acc << 8) | v
            acc_len += 8
            while acc_len >= 5:
                acc_len -= 5
                dest[out_idx] = chars[acc >> acc_len]
                out_idx += 1
                acc &= (1 << acc_len) - 1

        # Left-align the last 1-4 bits into a final symbol
        if acc_len > 0:
            dest[out_idx] = chars[acc << (5 - acc_len)]
            out_idx += 1

        if self._pad_char is not None:
            for i in range(out_idx, out_len):
                dest[i] = self._pad_char

        return memoryview(dest)[:out_len]
