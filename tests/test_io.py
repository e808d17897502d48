import pytest

from fusio.buf import Buf, BufMut
from fusio.io import (
    BytesCursor,
    DynRead,
    DynWrite,
    Read,
    SeqRead,
    VecReader,
    Write,
)

HELLO = b"hello, world"


def test_abstract_interfaces_cannot_be_instantiated():
    for cls in (Read, Write, SeqRead):
        with pytest.raises(TypeError):
            cls()


@pytest.mark.asyncio
async def test_vec_reader_read_exact_at():
    reader = VecReader(bytearray(HELLO))
    buf = bytearray(5)
    returned = await reader.read_exact_at(buf, 7)
    assert returned is buf
    assert bytes(buf) == HELLO[7:12]


@pytest.mark.asyncio
async def test_vec_reader_read_past_end_raises():
    reader = VecReader(HELLO)
    with pytest.raises(EOFError):
        await reader.read_exact_at(bytearray(len(HELLO)), 1)


@pytest.mark.asyncio
async def test_vec_reader_read_to_end_and_size():
    reader = VecReader(HELLO)
    buf = bytearray(b"xx")
    returned = await reader.read_to_end_at(buf, 7)
    assert returned is buf
    assert bytes(buf) == b"xx" + HELLO[7:]
    assert await reader.size() == len(HELLO)


@pytest.mark.asyncio
async def test_vec_reader_read_to_end_out_of_range():
    reader = VecReader(HELLO)
    with pytest.raises(IndexError):
        await reader.read_to_end_at(bytearray(), len(HELLO) + 1)


@pytest.mark.asyncio
async def test_vec_reader_rejects_read_only_target():
    reader = VecReader(HELLO)
    with pytest.raises(TypeError):
        await reader.read_exact_at(b"\x00\x00", 0)


@pytest.mark.asyncio
async def test_vec_reader_into_bufmut_window():
    reader = VecReader(HELLO)
    data = bytearray(len(HELLO) + 2)
    window = BufMut(data, 2)
    await reader.read_exact_at(window, 0)
    assert bytes(data[2:]) == HELLO
    assert bytes(data[:2]) == b"\x00\x00"


@pytest.mark.asyncio
async def test_cursor_write_then_read_round_trip():
    cursor = BytesCursor()
    returned = await cursor.write_all(HELLO)
    assert returned is HELLO
    await cursor.flush()
    await cursor.close()
    assert cursor.getvalue() == HELLO

    assert cursor.seek(0) == 0
    out = bytearray(len(HELLO))
    assert await cursor.read_exact(out) is out
    assert bytes(out) == HELLO
    assert cursor.position == len(HELLO)


@pytest.mark.asyncio
async def test_cursor_overwrites_at_position():
    cursor = BytesCursor(bytearray(HELLO))
    cursor.seek(7)
    await cursor.write_all(b"fusio")
    assert cursor.getvalue() == b"hello, fusio"


@pytest.mark.asyncio
async def test_cursor_pads_when_writing_past_end():
    cursor = BytesCursor()
    cursor.seek(3)
    await cursor.write_all(b"ab")
    assert cursor.getvalue() == b"\x00\x00\x00ab"


@pytest.mark.asyncio
async def test_cursor_read_past_end_keeps_position():
    cursor = BytesCursor(bytearray(b"abc"))
    with pytest.raises(EOFError):
        await cursor.read_exact(bytearray(4))
    assert cursor.position == 0


def test_cursor_negative_seek_rejected():
    with pytest.raises(ValueError):
        BytesCursor().seek(-1)


@pytest.mark.asyncio
async def test_cursor_sequential_reads():
    cursor = BytesCursor(bytearray(HELLO))
    first = await cursor.read_exact(bytearray(5))
    second = await cursor.read_exact(bytearray(7))
    assert bytes(first) + bytes(second) == HELLO


@pytest.mark.asyncio
async def test_dyn_write_returns_original_buffer():
    cursor = BytesCursor()
    writer = DynWrite(cursor)
    payload = bytearray(HELLO)
    returned = await writer.write_all(payload)
    assert returned is payload
    await writer.flush()
    await writer.close()
    assert cursor.getvalue() == HELLO


@pytest.mark.asyncio
async def test_dyn_write_passes_buf_through():
    cursor = BytesCursor()
    writer = DynWrite(cursor)
    window = Buf(HELLO, 7)
    assert await writer.write_all(window) is window
    assert cursor.getvalue() == HELLO[7:]


@pytest.mark.asyncio
async def test_dyn_read_returns_original_buffer():
    reader = DynRead(VecReader(HELLO))
    buf = bytearray(len(HELLO))
    returned = await reader.read_exact_at(buf, 0)
    assert returned is buf
    assert bytes(buf) == HELLO
    assert await reader.size() == len(HELLO)


@pytest.mark.asyncio
async def test_dyn_read_to_end_and_errors():
    reader = DynRead(VecReader(HELLO))
    out = await reader.read_to_end_at(bytearray(), 0)
    assert bytes(out) == HELLO
    with pytest.raises(EOFError):
        await reader.read_exact_at(bytearray(len(HELLO) + 1), 0)


@pytest.mark.asyncio
async def test_write_then_read_through_dynamic_wrappers():
    cursor = BytesCursor()
    await DynWrite(cursor).write_all(HELLO)
    await cursor.close()
    reader = DynRead(VecReader(cursor.getvalue()))
    read_buf = await reader.read_exact_at(bytearray(12), 0)
    assert bytes(read_buf) == b"hello, world"