"""Searching and comparing byte sequences."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_length(data: BytesLike, n: int) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > len(data):
        raise ValueError(f"length {n} exceeds buffer of {len(data)} bytes")


def find_byte(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in ``data[:n]``.

    ``value`` is reduced to its low eight bits. Returns None if absent.
    """
    _check_length(data, n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index == -1 else index


def compare_bytes(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_length(first, n)
    _check_length(second, n)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0