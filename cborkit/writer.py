"""A small CBOR writer that appends encoded items to a byte buffer."""

from __future__ import annotations

import struct

_UINT64_MAX = (1 << 64) - 1


def _head(major: int, argument: int, limit: int = _UINT64_MAX) -> bytes:
    """Encode a CBOR initial byte and its argument in the shortest form."""
    if not 0 <= argument <= limit:
        raise OverflowError(f"{argument} is out of range")
    if argument <= 23:
        return bytes([major << 5 | argument])
    info, width = next(
        (i, w) for i, w in ((24, 1), (25, 2), (26, 4), (27, 8)) if argument >> (8 * w) == 0
    )
    return bytes([major << 5 | info]) + argument.to_bytes(width, "big")


class Writer:
    """Append CBOR items to a bytearray, shared with the caller if given."""

    def __init__(self, buffer: bytearray | None = None) -> None:
        self._buffer = bytearray() if buffer is None else buffer

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def write_map_header(self, size: int) -> None:
        self._buffer += _head(5, size, 0xFFFF_FFFF)

    def write_string(self, value: str) -> None:
        data = value.encode("utf-8")
        self._buffer += _head(3, len(data)) + data

    def write_bool(self, value: bool) -> None:
        self._buffer.append(0xF5 if value else 0xF4)

    def write_int(self, value: int) -> None:
        self.write_int64(value)

    def write_int64(self, value: int) -> None:
        if not -(1 << 63) <= value < 1 << 63:
            raise OverflowError(f"{value} does not fit in a signed 64-bit integer")
        self._buffer += _head(0, value) if value >= 0 else _head(1, -1 - value)

    def write_uint(self, value: int) -> None:
        self.write_uint64(value)

    def write_uint64(self, value: int) -> None:
        self._buffer += _head(0, value)

    def write_float32(self, value: float) -> None:
        self._buffer += b"\xfa" + struct.pack(">f", value)

    def write_float64(self, value: float) -> None:
        self._buffer += b"\xfb" + struct.pack(">d", value)

    def write_bytes(self, value: bytes) -> None:
        data = bytes(value)
        self._buffer += _head(2, len(data)) + data