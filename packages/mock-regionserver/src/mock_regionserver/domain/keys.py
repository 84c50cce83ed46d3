"""Region and row key normalization."""

from __future__ import annotations

BytesLike = bytes | bytearray | memoryview


def to_key(value: BytesLike) -> bytes:
    """Normalize a bytes-like region or row key to immutable bytes.

    Keys are compared by value: a bytearray and a bytes object holding the
    same octets address the same fixture entry.

    Args:
        value: The key as bytes, bytearray or memoryview.

    Returns:
        The key as bytes.

    Raises:
        TypeError: If value is not bytes-like (str included).
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise TypeError(
        f"keys must be bytes-like, got {type(value).__name__}: {value!r}"
    )
