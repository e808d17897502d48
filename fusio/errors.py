"""Error types raised by storage operations and by the append-only log."""

from __future__ import annotations


class FusioError(Exception):
    """Base error of storage operations.

    When built from another exception the message is that exception's
    message, and the wrapped exception is available as ``source``.
    """

    def __init__(self, *args: object) -> None:
        super().__init__(*args)
        if self.source is not None:
            self.__cause__ = self.source

    @property
    def source(self) -> BaseException | None:
        """The wrapped exception, if this error was built from one."""
        if len(self.args) == 1 and isinstance(self.args[0], BaseException):
            return self.args[0]
        return None


class PathError(FusioError):
    """A path could not be parsed or resolved."""


class RemoteError(FusioError):
    """A remote storage service reported a failure."""


class UnsupportedError(FusioError):
    """The requested operation is not supported by the backend."""

    def __init__(self, message: str) -> None:
        super().__init__(f"unsupported operation: {message}")
        self.message = message


class CastError(FusioError):
    """A dynamic cast between file types failed."""

    def __init__(self) -> None:
        super().__init__("Performs dynamic cast failed.")


class WasmError(FusioError):
    """An error raised by a browser storage backend."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Error occurs in wasm: {message}")
        self.message = message


class LogError(Exception):
    """Base error of the append-only log.

    Built from another exception, its message is that exception's message.
    """

    def __init__(self, *args: object) -> None:
        super().__init__(*(args or ("log error",)))
        if self.source is not None:
            self.__cause__ = self.source

    @property
    def source(self) -> BaseException | None:
        """The wrapped exception, if this error was built from one."""
        if len(self.args) == 1 and isinstance(self.args[0], BaseException):
            return self.args[0]
        return None


class LogIOError(LogError):
    """An operating-system I/O error occurred while using the log."""

    def __init__(self, error: OSError) -> None:
        super().__init__(f"IO error: {error}")
        self.error = error
        self.__cause__ = error


class S3Error(LogError):
    """A remote storage error occurred while using the log."""

    def __init__(self, error: FusioError) -> None:
        super().__init__(f"S3 error: {error}")
        self.error = error
        self.__cause__ = error


class EncodeError(LogError):
    """A log entry could not be encoded."""

    def __init__(self, message: str) -> None:
        super().__init__(f"encode error: {message}")
        self.message = message


class DecodeError(LogError):
    """A log entry could not be decoded."""

    def __init__(self, message: str) -> None:
        super().__init__(f"decode error: {message}")
        self.message = message


class BadDataError(LogError):
    """Recovered log data is malformed."""

    def __init__(self) -> None:
        super().__init__("recover error: bad data")


class ChecksumError(LogError):
    """A recovered log entry failed its checksum."""

    def __init__(self) -> None:
        super().__init__("recover error: checksum does not match")


def to_log_error(err: BaseException) -> LogError:
    """Map a storage error onto the matching log error."""
    if isinstance(err, LogError):
        return err
    if isinstance(err, OSError):
        return LogIOError(err)
    if isinstance(err, RemoteError):
        return S3Error(err)
    return LogError(err)