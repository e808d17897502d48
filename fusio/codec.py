"""Binary encoding of values onto writers and decoding from sequential readers.

Numbers are stored little-endian at their fixed width, booleans as a single
byte and optional values as a one-byte tag followed by the value.
"""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar, Union

from .errors import DecodeError
from .io import SeqRead, Write

T = TypeVar("T")
E = TypeVar("E", bound="Encodable")


class Encodable(ABC):
    """A value that knows how to write itself and read itself back."""

    @abstractmethod
    async def encode(self, writer: Write) -> None:
        """Write this value onto ``writer``."""

    @abstractmethod
    def size(self) -> int:
        """Number of bytes the value occupies once encoded."""

    @classmethod
    @abstractmethod
    async def decode(cls: type[E], reader: SeqRead) -> E:
        """Read a value of this type from ``reader``."""


class Codec(ABC, Generic[T]):
    """Encodes and decodes values of one kind."""

    @abstractmethod
    async def encode(self, value: T, writer: Write) -> None:
        """Write ``value`` onto ``writer``."""

    @abstractmethod
    async def decode(self, reader: SeqRead) -> T:
        """Read one value from ``reader``."""

    @abstractmethod
    def size(self, value: T) -> int:
        """Number of bytes ``value`` occupies once encoded."""


class _EncodableCodec(Codec[Any]):
    """Adapts an ``Encodable`` subclass to the ``Codec`` interface."""

    def __init__(self, kind: type[Encodable]) -> None:
        self.kind = kind

    async def encode(self, value: Encodable, writer: Write) -> None:
        await value.encode(writer)

    async def decode(self, reader: SeqRead) -> Encodable:
        return await self.kind.decode(reader)

    def size(self, value: Encodable) -> int:
        return value.size()


CodecLike = Union[Codec[Any], type]


def _as_codec(kind: CodecLike) -> Codec[Any]:
    if isinstance(kind, Codec):
        return kind
    if isinstance(kind, type) and issubclass(kind, Encodable):
        return _EncodableCodec(kind)
    raise TypeError(f"{kind!r} is neither a Codec nor an Encodable subclass")


class NumberCodec(Codec[Union[int, float]]):
    """A fixed-width little-endian number described by a ``struct`` code."""

    def __init__(self, code: str) -> None:
        self._struct = struct.Struct("<" + code)
        self.code = code

    async def encode(self, value: int | float, writer: Write) -> None:
        try:
            data = self._struct.pack(value)
        except struct.error as exc:
            raise ValueError(f"cannot encode {value!r} as {self.code!r}: {exc}") from exc
        await writer.write_all(data)

    async def decode(self, reader: SeqRead) -> int | float:
        buf = await reader.read_exact(bytearray(self._struct.size))
        return self._struct.unpack(bytes(buf))[0]

    def size(self, value: int | float) -> int:
        return self._struct.size

    def __repr__(self) -> str:
        return f"NumberCodec({self.code!r})"


I8 = NumberCodec("b")
I16 = NumberCodec("h")
I32 = NumberCodec("i")
I64 = NumberCodec("q")
U8 = NumberCodec("B")
U16 = NumberCodec("H")
U32 = NumberCodec("I")
U64 = NumberCodec("Q")
F32 = NumberCodec("f")
F64 = NumberCodec("d")


class BoolCodec(Codec[bool]):
    """A boolean stored as one byte: 1 for true, 0 for false."""

    async def encode(self, value: bool, writer: Write) -> None:
        await U8.encode(1 if value else 0, writer)

    async def decode(self, reader: SeqRead) -> bool:
        return await U8.decode(reader) == 1

    def size(self, value: bool) -> int:
        return 1


BOOL = BoolCodec()


class OptionCodec(Codec[Any]):
    """An optional value: tag 0 for ``None``, tag 1 followed by the value."""

    def __init__(self, inner: CodecLike) -> None:
        self.inner = _as_codec(inner)

    async def encode(self, value: Any, writer: Write) -> None:
        if value is None:
            await U8.encode(0, writer)
        else:
            await U8.encode(1, writer)
            await self.inner.encode(value, writer)

    async def decode(self, reader: SeqRead) -> Any:
        tag = await U8.decode(reader)
        if tag == 0:
            return None
        if tag == 1:
            return await self.inner.decode(reader)
        raise DecodeError(f"invalid option tag {tag}")

    def size(self, value: Any) -> int:
        if value is None:
            return 1
        return 1 + self.inner.size(value)