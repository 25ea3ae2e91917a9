"""Sequential files of serialized protobuf messages.

The layout is the one written by a big-endian binary data stream: a header
made of the file prefix (UTF-16 string with a 32-bit byte length) and a
32-bit version number 0, followed by records that each hold a 32-bit length
and that many bytes of a serialized message.
"""

from __future__ import annotations

import struct
import threading
from typing import Any, BinaryIO, Iterator, Optional, Union

_NULL_LENGTH = 0xFFFFFFFF
_FILE_VERSION = 0


class ProtobufFileError(Exception):
    """Raised when a message file cannot be opened, read or written."""


def _encode_string(text: str) -> bytes:
    data = text.encode("utf-16-be")
    return struct.pack(">I", len(data)) + data


def _encode_bytes(data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + data


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise ProtobufFileError("unexpected end of message file")
    return data


def _read_length_prefixed(stream: BinaryIO) -> bytes:
    (length,) = struct.unpack(">I", _read_exact(stream, 4))
    if length == _NULL_LENGTH:
        return b""
    return _read_exact(stream, length)


def _serialize(message: Any) -> Optional[bytes]:
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    is_initialized = getattr(message, "IsInitialized", None)
    if is_initialized is not None and not is_initialized():
        return None
    try:
        return message.SerializeToString()
    except Exception:
        return None


class ProtobufFileSaver:
    """Appends serialized messages to a file; safe to use from many threads.

    The file is created, truncated and given its header on the first save.
    """

    def __init__(self, filename: str, file_prefix: str) -> None:
        self._filename = filename
        self._file_prefix = file_prefix
        self._file: Optional[BinaryIO] = None
        self._lock = threading.RLock()

    def _open(self) -> BinaryIO:
        if self._file is None:
            try:
                handle = open(self._filename, "wb")
            except OSError as exc:
                raise ProtobufFileError(
                    f"could not open {self._filename} for saving: {exc}"
                ) from exc
            handle.write(_encode_string(self._file_prefix))
            handle.write(struct.pack(">i", _FILE_VERSION))
            self._file = handle
        return self._file

    def save_message(self, message: Union[Any, bytes]) -> bool:
        """Write one message; return False if it could not be serialized.

        ``message`` is a protobuf message or already serialized bytes.
        """
        data = _serialize(message)
        if data is None:
            return False
        with self._lock:
            handle = self._open()
            handle.write(_encode_bytes(data))
            handle.flush()
        return True

    def close(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> ProtobufFileSaver:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class ProtobufFileReader:
    """Reads the messages of a file written by :class:`ProtobufFileSaver`."""

    def __init__(self) -> None:
        self._file: Optional[BinaryIO] = None

    def open(self, filename: str, file_prefix: str) -> None:
        """Open a file and check its prefix and version."""
        self.close()
        try:
            handle = open(filename, "rb")
        except OSError as exc:
            raise ProtobufFileError(f"could not open {filename}: {exc}") from exc
        try:
            raw_type = _read_length_prefixed(handle)
            if len(raw_type) % 2:
                raise ProtobufFileError("malformed file type in header")
            file_type = raw_type.decode("utf-16-be")
            (version,) = struct.unpack(">i", _read_exact(handle, 4))
            if file_type != file_prefix:
                raise ProtobufFileError(
                    f"file type {file_type!r} does not match {file_prefix!r}"
                )
            if version != _FILE_VERSION:
                raise ProtobufFileError(f"unsupported file version {version}")
        except BaseException:
            handle.close()
            raise
        self._file = handle

    def _next_payload(self) -> Optional[bytes]:
        if self._file is None:
            raise ProtobufFileError("no message file is open")
        head = self._file.read(4)
        if not head:
            return None
        if len(head) != 4:
            raise ProtobufFileError("unexpected end of message file")
        (length,) = struct.unpack(">I", head)
        if length == _NULL_LENGTH:
            return b""
        return _read_exact(self._file, length)

    def read_next(self, message: Any) -> bool:
        """Parse the next record into ``message``; return False at the end."""
        data = self._next_payload()
        if data is None:
            return False
        try:
            message.ParseFromString(data)
        except Exception as exc:
            raise ProtobufFileError(f"could not parse message: {exc}") from exc
        return True

    def __iter__(self) -> Iterator[bytes]:
        """Yield the serialized bytes of each remaining record."""
        while True:
            data = self._next_payload()
            if data is None:
                return
            yield data

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> ProtobufFileReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()