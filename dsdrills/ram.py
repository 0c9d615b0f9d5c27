"""A 100 KB byte-addressed memory of signed 8-bit cells."""

from __future__ import annotations

RAM_SIZE = 100 * 1024


class Ram:
    """Memory of RAM_SIZE signed bytes, all zero at first."""

    def __init__(self) -> None:
        self._mem = bytearray(RAM_SIZE)

    def _check(self, address: int) -> None:
        if not 0 <= address < len(self._mem):
            raise IndexError(f"address {address} out of range")

    def read(self, address: int) -> int:
        """Return the signed byte stored at ``address``."""
        self._check(address)
        value = self._mem[address]
        return value - 256 if value >= 128 else value

    def write(self, address: int, value: int) -> None:
        """Store ``value`` at ``address``, keeping only its low eight bits."""
        self._check(address)
        self._mem[address] = value & 0xFF

    def __len__(self) -> int:
        return len(self._mem)