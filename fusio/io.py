"""Core asynchronous read and write interfaces over owned buffers.

Every operation takes a buffer and hands the very same buffer back, so
callers that pass ownership of a buffer always get it returned. Failures
are raised as exceptions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from .buf import Buf, BufMut, BytesLike, as_slice, slice_buffer, slice_buffer_mut

B = TypeVar("B")


def _writable_view(buf: bytearray | memoryview | BufMut) -> memoryview:
    """A writable view over the initialised bytes of ``buf``."""
    if isinstance(buf, BufMut):
        return buf.as_slice_mut()
    if isinstance(buf, Buf):
        raise TypeError("a read-only Buf cannot be read into")
    view = memoryview(buf)
    if view.readonly:
        raise TypeError(f"{type(buf).__name__} is not a writable buffer")
    return view.cast("B") if view.format != "B" or view.ndim != 1 else view


class Write(ABC):
    """Sequential "write all, then overwrite on close" semantics.

    Contents are only guaranteed to be persisted once ``close`` has been
    awaited. ``write_all`` returns the buffer it was given.
    """

    @abstractmethod
    async def write_all(self, buf: B) -> B:
        """Write every byte of ``buf`` and return ``buf``."""

    @abstractmethod
    async def flush(self) -> None:
        """Flush buffered data, where the implementation supports it."""

    @abstractmethod
    async def close(self) -> None:
        """Finish writing and persist the contents."""


class Read(ABC):
    """Random "read exactly" semantics.

    ``read_exact_at`` fills the whole buffer with data starting at ``pos``
    and returns the buffer it was given.
    """

    @abstractmethod
    async def read_exact_at(self, buf: B, pos: int) -> B:
        """Fill ``buf`` completely with data starting at ``pos``."""

    @abstractmethod
    async def read_to_end_at(self, buf: bytearray, pos: int) -> bytearray:
        """Append everything from ``pos`` to the end onto ``buf``."""

    @abstractmethod
    async def size(self) -> int:
        """Total size of the underlying data in bytes."""


class SeqRead(ABC):
    """Sequential "read exactly" semantics from the current position."""

    @abstractmethod
    async def read_exact(self, buf: B) -> B:
        """Fill ``buf`` completely with the next bytes and return ``buf``."""


class DynWrite(Write):
    """Wraps any writer, passing buffers through as ``Buf`` windows."""

    def __init__(self, inner: Write) -> None:
        self.inner = inner

    async def write_all(self, buf: B) -> B:
        if isinstance(buf, Buf):
            await self.inner.write_all(buf)
            return buf
        window = slice_buffer(buf)  # type: ignore[arg-type]
        await self.inner.write_all(window)
        if isinstance(buf, BufMut):
            return buf
        return window.recover()  # type: ignore[return-value]

    async def flush(self) -> None:
        await self.inner.flush()

    async def close(self) -> None:
        await self.inner.close()


class DynRead(Read):
    """Wraps any reader, passing buffers through as ``BufMut`` windows."""

    def __init__(self, inner: Read) -> None:
        self.inner = inner

    async def read_exact_at(self, buf: B, pos: int) -> B:
        if isinstance(buf, BufMut):
            await self.inner.read_exact_at(buf, pos)
            return buf
        window = slice_buffer_mut(buf)  # type: ignore[arg-type]
        await self.inner.read_exact_at(window, pos)
        return window.recover()  # type: ignore[return-value]

    async def read_to_end_at(self, buf: bytearray, pos: int) -> bytearray:
        return await self.inner.read_to_end_at(buf, pos)

    async def size(self) -> int:
        return await self.inner.size()


class VecReader(Read):
    """Random-access reads over an in-memory byte buffer."""

    def __init__(self, data: BytesLike) -> None:
        self.data = data

    async def read_exact_at(self, buf: B, pos: int) -> B:
        target = _writable_view(buf)  # type: ignore[arg-type]
        source = memoryview(self.data)
        end = pos + len(target)
        if end > len(source):
            raise EOFError(f"read of {len(target)} bytes at {pos} past end of {len(source)} bytes")
        target[:] = source[pos:end]
        return buf

    async def read_to_end_at(self, buf: bytearray, pos: int) -> bytearray:
        source = memoryview(self.data)
        if pos > len(source):
            raise IndexError(f"position {pos} out of range for data of length {len(source)}")
        buf.extend(source[pos:])
        return buf

    async def size(self) -> int:
        return len(memoryview(self.data))


class BytesCursor(Write, SeqRead):
    """An in-memory growable byte buffer with a position.

    Writes overwrite or extend at the position, padding with zeros when the
    position lies past the end; reads consume bytes from the position.
    """

    def __init__(self, data: bytearray | None = None) -> None:
        self.data = bytearray() if data is None else data
        self.position = 0

    async def write_all(self, buf: B) -> B:
        chunk = as_slice(buf)  # type: ignore[arg-type]
        pos = self.position
        if pos > len(self.data):
            self.data.extend(bytes(pos - len(self.data)))
        self.data[pos:pos + len(chunk)] = chunk
        self.position = pos + len(chunk)
        return buf

    async def flush(self) -> None:
        return None

    async def close(self) -> None:
        return None

    async def read_exact(self, buf: B) -> B:
        target = _writable_view(buf)  # type: ignore[arg-type]
        pos = self.position
        end = pos + len(target)
        if end > len(self.data):
            raise EOFError(f"read of {len(target)} bytes at {pos} past end of {len(self.data)} bytes")
        target[:] = memoryview(self.data)[pos:end]
        self.position = end
        return buf

    def seek(self, pos: int) -> int:
        """Move to absolute position ``pos`` and return it."""
        if pos < 0:
            raise ValueError("cannot seek to a negative position")
        self.position = pos
        return pos

    def getvalue(self) -> bytes:
        """A copy of the whole buffer."""
        return bytes(self.data)