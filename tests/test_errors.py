import pytest

from fusio.errors import (
    BadDataError,
    CastError,
    ChecksumError,
    DecodeError,
    EncodeError,
    FusioError,
    LogError,
    LogIOError,
    PathError,
    RemoteError,
    S3Error,
    UnsupportedError,
    WasmError,
    to_log_error,
)


def test_unsupported_message():
    err = UnsupportedError("append mode is not supported in Amazon S3")
    assert str(err) == "unsupported operation: append mode is not supported in Amazon S3"
    assert err.message == "append mode is not supported in Amazon S3"
    assert isinstance(err, FusioError)


def test_cast_error_message():
    assert str(CastError()) == "Performs dynamic cast failed."


def test_wasm_error_message():
    err = WasmError("boom")
    assert str(err) == "Error occurs in wasm: boom"


def test_transparent_wrapping():
    inner = ValueError("inner failure")
    for cls in (FusioError, PathError, RemoteError):
        err = cls(inner)
        assert str(err) == str(inner)
        assert err.source is inner
        assert err.__cause__ is inner


def test_plain_message_has_no_source():
    err = FusioError("file is not open as read mode")
    assert err.source is None
    assert str(err) == "file is not open as read mode"


def test_log_error_default_message():
    assert str(LogError()) == "log error"


def test_log_error_variants_messages():
    assert str(EncodeError("x")) == "encode error: x"
    assert str(DecodeError("y")) == "decode error: y"
    assert str(BadDataError()) == "recover error: bad data"
    assert str(ChecksumError()) == "recover error: checksum does not match"


def test_log_io_error_message():
    inner = OSError("disk gone")
    err = LogIOError(inner)
    assert str(err) == f"IO error: {inner}"
    assert err.error is inner


def test_to_log_error_maps_os_error():
    inner = FileNotFoundError("missing")
    err = to_log_error(inner)
    assert isinstance(err, LogIOError)
    assert err.error is inner


def test_to_log_error_maps_remote_error():
    remote = RemoteError(RuntimeError("service down"))
    err = to_log_error(remote)
    assert isinstance(err, S3Error)
    assert err.error is remote
    assert str(err) == f"S3 error: {remote}"


def test_to_log_error_wraps_other_errors():
    other = UnsupportedError("link")
    err = to_log_error(other)
    assert type(err) is LogError
    assert err.source is other
    assert str(err) == str(other)


def test_to_log_error_passes_log_errors_through():
    original = ChecksumError()
    assert to_log_error(original) is original


def test_errors_can_be_raised_and_caught_by_base():
    inner = ValueError("bad path")
    with pytest.raises(FusioError) as fusio_info:
        raise PathError(inner)
    assert isinstance(fusio_info.value, PathError)
    assert fusio_info.value.source is inner
    assert str(fusio_info.value) == "bad path"

    with pytest.raises(LogError) as log_info:
        raise BadDataError()
    assert isinstance(log_info.value, BadDataError)
    assert str(log_info.value) == "recover error: bad data"