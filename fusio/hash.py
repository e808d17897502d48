"""Writers and readers that keep a CRC-32 checksum of the bytes they pass."""

from __future__ import annotations

import zlib
from typing import TypeVar

from .buf import as_slice, bytes_init
from .codec import U32
from .errors import to_log_error
from .io import SeqRead, Write

B = TypeVar("B")


class HashWriter(Write):
    """Forwards writes to ``writer`` while hashing every byte written."""

    def __init__(self, writer: Write) -> None:
        self.writer = writer
        self._crc = 0

    async def write_all(self, buf: B) -> B:
        result = await self.writer.write_all(buf)
        self._crc = zlib.crc32(as_slice(result), self._crc)  # type: ignore[arg-type]
        return result

    async def flush(self) -> None:
        await self.writer.flush()

    async def close(self) -> None:
        await self.writer.close()

    async def eol(self) -> None:
        """Append the checksum of everything written so far as a ``u32``."""
        await U32.encode(self._crc, self.writer)


class HashReader(SeqRead):
    """Reads from ``reader`` while hashing every byte read."""

    def __init__(self, reader: SeqRead) -> None:
        self.reader = reader
        self._crc = 0
        self._pos = 0

    async def read_exact(self, buf: B) -> B:
        length = bytes_init(buf)  # type: ignore[arg-type]
        try:
            result = await self.reader.read_exact(buf)
        finally:
            self._pos += length
        self._crc = zlib.crc32(as_slice(result), self._crc)  # type: ignore[arg-type]
        return result

    async def checksum(self) -> bool:
        """Read the stored checksum and tell whether it matches the data read."""
        try:
            stored = await U32.decode(self.reader)
        except Exception as exc:
            raise to_log_error(exc) from exc
        self._pos += U32.size(0)
        return self._crc == stored

    def position(self) -> int:
        """Number of bytes consumed so far, checksum included."""
        return self._pos