"""Internal shared utilities for charprobe."""

from __future__ import annotations

#: Default maximum number of bytes a detector feeds to its probers.
DEFAULT_MAX_BYTES: int = 200_000

#: Default minimum confidence a prober must exceed to be reported.
MINIMUM_THRESHOLD: float = 0.20

#: Confidence above which a prober may declare ``FOUND_IT`` early.
SHORTCUT_THRESHOLD: float = 0.95


def _validate_max_bytes(max_bytes: int) -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes < 1:
        msg = "max_bytes must be a positive integer"
        raise ValueError(msg)


def _validate_threshold(threshold: float) -> None:
    """Raise ValueError if *threshold* is not a number within [0.0, 1.0]."""
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        msg = "minimum_threshold must be a number"
        raise ValueError(msg)
    if not 0.0 <= threshold <= 1.0:
        msg = "minimum_threshold must be between 0.0 and 1.0"
        raise ValueError(msg)


def _slice_range(
    byte_str: bytes | bytearray | memoryview, offset: int = 0, length: int | None = None
) -> bytes:
    """Return the bytes in ``byte_str[offset:offset + length]``.

    *length* of ``None`` means "up to the end of the buffer".  The caller's
    buffer is never modified; a view or copy of the requested range is
    returned instead.

    :raises ValueError: If *offset* or *length* is negative or the range runs
        past the end of *byte_str*.
    :raises TypeError: If *byte_str* does not support the buffer protocol.
    """
    view = memoryview(byte_str)
    size = view.nbytes
    if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
        msg = f"offset must be a non-negative integer, got {offset!r}"
        raise ValueError(msg)
    if length is None:
        length = size - offset
    elif isinstance(length, bool) or not isinstance(length, int) or length < 0:
        msg = f"length must be a non-negative integer, got {length!r}"
        raise ValueError(msg)
    if offset + length > size or offset > size:
        msg = f"range [{offset}, {offset + length}) exceeds buffer of {size} bytes"
        raise ValueError(msg)
    if isinstance(byte_str, bytes) and offset == 0 and length == size:
        return byte_str
    return view.cast("B")[offset : offset + length].tobytes()
