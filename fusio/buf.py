"""Views over byte buffers that hand the original buffer back afterwards.

A ``Buf`` or ``BufMut`` keeps the buffer it was made from together with a
window ``[start, end)`` over it. ``recover`` returns the original object,
so a caller always gets back the buffer it passed in.
"""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def calculate_bounds(length: int, start: int | None, end: int | None) -> tuple[int, int]:
    """Resolve an optional ``start``/``end`` pair against a buffer length."""
    lo = 0 if start is None else start
    hi = length if end is None else end
    return lo, hi


def _check_bounds(length: int, start: int, end: int) -> None:
    if not 0 <= start <= end <= length:
        raise IndexError(f"range {start}..{end} out of bounds for buffer of length {length}")


def _is_writable(data: object) -> bool:
    try:
        return not memoryview(data).readonly
    except TypeError:
        return False


class Buf:
    """A read-only window over a byte buffer."""

    __slots__ = ("_data", "start", "end")

    def __init__(self, data: BytesLike, start: int | None = None, end: int | None = None) -> None:
        length = len(memoryview(data))
        lo, hi = calculate_bounds(length, start, end)
        _check_bounds(length, lo, hi)
        self._data = data
        self.start = lo
        self.end = hi

    def _length(self) -> int:
        return len(memoryview(self._data))

    def bytes_init(self) -> int:
        """Number of initialised bytes from ``start`` to the end of the buffer."""
        return self._length() - self.start

    def __len__(self) -> int:
        return self.bytes_init()

    def as_slice(self) -> memoryview:
        """A read-only view of the bytes from ``start`` onwards."""
        return memoryview(self._data).toreadonly()[self.start:]

    def as_bytes(self) -> bytes:
        """A copy of the bytes in the window ``[start, end)``."""
        return bytes(memoryview(self._data)[self.start:self.end])

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def slice(self, start: int | None = None, end: int | None = None) -> Buf:
        """A new window over the same buffer; missing bounds keep the current ones."""
        lo = self.start if start is None else start
        hi = self.end if end is None else end
        return Buf(self._data, lo, hi)

    def recover(self) -> BytesLike:
        """The buffer this view was made from."""
        return self._data

    def __repr__(self) -> str:
        return f"Buf(start={self.start}, end={self.end}, len={self._length()})"


class BufMut:
    """A writable window over a mutable byte buffer."""

    __slots__ = ("_data", "start", "end")

    def __init__(
        self, data: bytearray | memoryview, start: int | None = None, end: int | None = None
    ) -> None:
        if not _is_writable(data):
            raise TypeError(f"{type(data).__name__} is not a writable buffer")
        length = len(memoryview(data))
        lo, hi = calculate_bounds(length, start, end)
        _check_bounds(length, lo, hi)
        self._data = data
        self.start = lo
        self.end = hi

    def _length(self) -> int:
        return len(memoryview(self._data))

    def bytes_init(self) -> int:
        """Number of initialised bytes from ``start`` to the end of the buffer."""
        return self._length() - self.start

    def __len__(self) -> int:
        return self.bytes_init()

    def as_slice(self) -> memoryview:
        """A read-only view of the bytes from ``start`` onwards."""
        return memoryview(self._data).toreadonly()[self.start:]

    def as_slice_mut(self) -> memoryview:
        """A writable view of the bytes from ``start`` onwards."""
        return memoryview(self._data)[self.start:]

    def as_bytes(self) -> bytes:
        """A copy of the bytes in the window ``[start, end)``."""
        return bytes(memoryview(self._data)[self.start:self.end])

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def slice(self, start: int | None = None, end: int | None = None) -> Buf:
        """A read-only window over the same buffer."""
        lo = self.start if start is None else start
        hi = self.end if end is None else end
        return Buf(self._data, lo, hi)

    def slice_mut(self, start: int | None = None, end: int | None = None) -> BufMut:
        """A writable window over the same buffer."""
        lo = self.start if start is None else start
        hi = self.end if end is None else end
        return BufMut(self._data, lo, hi)

    def recover(self) -> bytearray | memoryview:
        """The buffer this view was made from."""
        return self._data

    def __repr__(self) -> str:
        return f"BufMut(start={self.start}, end={self.end}, len={self._length()})"


def bytes_init(buf: BytesLike | Buf | BufMut) -> int:
    """Number of initialised bytes in any supported buffer."""
    if isinstance(buf, (Buf, BufMut)):
        return buf.bytes_init()
    return len(memoryview(buf))


def as_slice(buf: BytesLike | Buf | BufMut) -> memoryview:
    """A read-only view of the initialised bytes of any supported buffer."""
    if isinstance(buf, (Buf, BufMut)):
        return buf.as_slice()
    return memoryview(buf).toreadonly()


def slice_buffer(buf: BytesLike | Buf | BufMut, start: int | None = None, end: int | None = None) -> Buf:
    """A read-only window over ``buf``."""
    if isinstance(buf, (Buf, BufMut)):
        return buf.slice(start, end)
    return Buf(buf, start, end)


def slice_buffer_mut(
    buf: bytearray | memoryview | BufMut, start: int | None = None, end: int | None = None
) -> BufMut:
    """A writable window over ``buf``; raises ``TypeError`` for read-only buffers."""
    if isinstance(buf, BufMut):
        return buf.slice_mut(start, end)
    if isinstance(buf, Buf):
        raise TypeError("a read-only Buf cannot be sliced as writable")
    return BufMut(buf, start, end)