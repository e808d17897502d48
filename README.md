# fusio

Async I/O building blocks that work with owned buffers: a small set of
read/write interfaces, buffer windows that hand the original buffer back,
a little-endian binary codec, and writers and readers that keep a running
CRC-32 of the bytes passing through them.

The package has no third-party dependencies.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `fusio.errors`

- `FusioError` and its subclasses `PathError`, `RemoteError`,
  `UnsupportedError`, `CastError` and `WasmError` for storage operations.
  A `FusioError` built from another exception exposes it as `source`.
- `LogError` and its subclasses `LogIOError`, `S3Error`, `EncodeError`,
  `DecodeError`, `BadDataError` and `ChecksumError`.
- `to_log_error(err)` turns an exception into a `LogError`: `OSError`
  becomes `LogIOError`, `RemoteError` becomes `S3Error`, a `LogError` is
  returned unchanged, and anything else is wrapped in a plain `LogError`.

### `fusio.buf`

- `Buf` is a read-only window `[start, end)` over `bytes`, `bytearray` or
  `memoryview`; `BufMut` is a writable one over `bytearray` or a writable
  `memoryview`. Both offer `bytes_init()`, `as_slice()`, `as_bytes()`,
  `slice(start, end)` and `recover()`, which returns the original buffer;
  `BufMut` adds `as_slice_mut()` and `slice_mut(start, end)`. Out-of-range
  windows raise `IndexError`.
- `calculate_bounds(length, start, end)` resolves optional bounds.
- `bytes_init(buf)`, `as_slice(buf)`, `slice_buffer(buf, start, end)` and
  `slice_buffer_mut(buf, start, end)` accept plain buffers as well as
  windows; `slice_buffer_mut` raises `TypeError` for read-only buffers.

### `fusio.io`

- `Read` (`read_exact_at`, `read_to_end_at`, `size`), `Write`
  (`write_all`, `flush`, `close`) and `SeqRead` (`read_exact`) are the
  abstract interfaces. Each operation returns the buffer it was given.
- `DynRead` and `DynWrite` wrap any reader or writer and pass buffers to
  it as `BufMut` / `Buf` windows.
- `VecReader(data)` reads at positions from in-memory bytes;
  `read_exact_at` raises `EOFError` when the read runs past the end.
- `BytesCursor` is an in-memory stream that can be written, moved with
  `seek(pos)` and read back with `read_exact`; `getvalue()` returns a copy
  of its contents. Writing past the end pads with zero bytes.

### `fusio.codec`

- `Codec` is the interface: `encode(value, writer)`, `decode(reader)`,
  `size(value)`.
- `NumberCodec(code)` stores a number little-endian with a `struct`
  format code. Ready-made instances: `I8`, `I16`, `I32`, `I64`, `U8`,
  `U16`, `U32`, `U64`, `F32`, `F64`.
- `BoolCodec` (instance `BOOL`) stores one byte, 1 for true, 0 for false.
- `OptionCodec(inner)` writes tag 0 for `None` or tag 1 followed by the
  value; an unknown tag raises `DecodeError`.
- `Encodable` is a base class for your own record types with `encode`,
  `size` and a `decode` class method. Wherever a codec takes an inner
  codec, an `Encodable` subclass may be given instead.

### `fusio.codec_collections`

- `StrCodec` (instance `STR`): UTF-8 with a `u16` byte length prefix;
  longer strings raise `EncodeError`, invalid UTF-8 raises `DecodeError`.
- `BytesCodec` (instance `BYTES`): a `u32` length prefix followed by the
  bytes; its `size` counts the payload only.
- `ListCodec(inner)`: a `u32` item count followed by the items.

### `fusio.hash`

- `HashWriter(writer)` forwards writes and hashes every byte; `eol()`
  appends the CRC-32 as a `u32`.
- `HashReader(reader)` forwards reads and hashes every byte; `checksum()`
  reads the stored `u32` and returns whether it matches, and `position()`
  reports the bytes consumed, checksum included.

## Example

```python
import asyncio

from fusio.codec import U64
from fusio.codec_collections import STR
from fusio.hash import HashReader, HashWriter
from fusio.io import BytesCursor


async def main():
    cursor = BytesCursor()
    writer = HashWriter(cursor)
    await U64.encode(4, writer)
    await STR.encode("hello", writer)
    await writer.eol()

    cursor.seek(0)
    reader = HashReader(cursor)
    assert await U64.decode(reader) == 4
    assert await STR.decode(reader) == "hello"
    assert await reader.checksum()


asyncio.run(main())
```

## What this package does not do

It provides the interfaces, in-memory implementations, codec and checksum
streams only. It has no file system backends (no local disk, S3 or other
remote storage) and no log file manager that opens, appends to or recovers
a log on storage; `RemoteError`, `S3Error` and the other storage errors
are there for code that supplies such backends itself.