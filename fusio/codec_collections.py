"""Codecs for length-prefixed strings, byte strings and lists.

Strings carry a little-endian ``u16`` byte length and byte strings a
``u32`` one. Lists carry a ``u32`` element count followed by their
elements.
"""

from __future__ import annotations

from typing import Any

from .codec import U16, U32, Codec, CodecLike, _as_codec
from .errors import DecodeError, EncodeError
from .io import SeqRead, Write

_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFF_FFFF


class StrCodec(Codec[str]):
    """A UTF-8 string prefixed by its byte length as a ``u16``."""

    async def encode(self, value: str, writer: Write) -> None:
        data = value.encode("utf-8")
        if len(data) > _U16_MAX:
            raise EncodeError(f"string of {len(data)} bytes exceeds the {_U16_MAX} byte limit")
        await U16.encode(len(data), writer)
        await writer.write_all(data)

    async def decode(self, reader: SeqRead) -> str:
        length = await U16.decode(reader)
        buf = await reader.read_exact(bytearray(length))
        try:
            return bytes(buf).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"string is not valid UTF-8: {exc}") from exc

    def size(self, value: str) -> int:
        return U16.size(0) + len(value.encode("utf-8"))


class BytesCodec(Codec[bytes]):
    """A byte string prefixed by its length as a ``u32``.

    ``size`` reports the length of the payload alone, without the prefix.
    """

    async def encode(self, value: bytes | bytearray | memoryview, writer: Write) -> None:
        data = bytes(value)
        if len(data) > _U32_MAX:
            raise EncodeError(f"byte string of {len(data)} bytes exceeds the {_U32_MAX} byte limit")
        await U32.encode(len(data), writer)
        await writer.write_all(data)

    async def decode(self, reader: SeqRead) -> bytes:
        length = await U32.decode(reader)
        buf = await reader.read_exact(bytearray(length))
        return bytes(buf)

    def size(self, value: bytes | bytearray | memoryview) -> int:
        return len(memoryview(value))


class ListCodec(Codec[list]):
    """A list of values of one kind, prefixed by its length as a ``u32``."""

    def __init__(self, inner: CodecLike) -> None:
        self.inner = _as_codec(inner)

    async def encode(self, value: list[Any], writer: Write) -> None:
        if len(value) > _U32_MAX:
            raise EncodeError(f"list of {len(value)} items exceeds the {_U32_MAX} item limit")
        await U32.encode(len(value), writer)
        for item in value:
            await self.inner.encode(item, writer)

    async def decode(self, reader: SeqRead) -> list[Any]:
        length = await U32.decode(reader)
        return [await self.inner.decode(reader) for _ in range(length)]

    def size(self, value: list[Any]) -> int:
        return U32.size(0) + sum(self.inner.size(item) for item in value)


STR = StrCodec()
BYTES = BytesCodec()