"""Bit-level reader over a byte buffer, most significant bit first."""

from __future__ import annotations


class BitStreamError(Exception):
    """Raised when a read is invalid or runs past the end of the data."""


class BitStream:
    """Reads bits from a copy of a byte buffer, most significant bit first."""

    MAX_BITS = 32

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self.data = bytes(data)
        self.byte_pos = 0
        self.bit_pos = 0

    def __len__(self) -> int:
        return len(self.data)

    def read(self, nbits: int, peek: bool = False) -> int:
        """Return the next ``nbits`` bits as an unsigned integer.

        With ``peek`` the position is left unchanged. Reading past the end
        raises :class:`BitStreamError`.
        """
        if not 0 <= nbits <= self.MAX_BITS:
            raise BitStreamError(f"cannot read {nbits} bits at once")

        saved = (self.byte_pos, self.bit_pos)
        value = 0
        for _ in range(nbits):
            if self.byte_pos >= len(self.data):
                raise BitStreamError("end of bit stream reached")
            byte = self.data[self.byte_pos]
            value = (value << 1) | ((byte >> (7 - self.bit_pos)) & 1)
            self.bit_pos += 1
            if self.bit_pos >= 8:
                self.bit_pos = 0
                self.byte_pos += 1

        if peek:
            self.byte_pos, self.bit_pos = saved
        return value