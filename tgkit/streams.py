"""Sources to read uploads from and destinations to write downloads to."""

from __future__ import annotations

import io
import os
import threading
from dataclasses import dataclass
from typing import Any, BinaryIO, Optional, Union

PathType = Union[str, "os.PathLike[str]"]


def _is_path(value: Any) -> bool:
    return isinstance(value, (str, os.PathLike))


def _is_bytes(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))


def _is_reader(value: Any) -> bool:
    return callable(getattr(value, "read", None))


@dataclass
class Source:
    """Something an upload can read from: a path, bytes, a buffer or a readable."""

    source: Any

    def size_and_name(self) -> tuple[int, str]:
        """Return ``(size, name)``; ``(0, "")`` where neither can be told."""
        src = self.source
        if _is_path(src):
            path = os.fspath(src)
            try:
                with open(path, "rb") as handle:
                    return os.fstat(handle.fileno()).st_size, path
            except OSError:
                return 0, ""
        if _is_bytes(src):
            return len(src), ""
        if isinstance(src, io.BytesIO):
            return 0, ""
        if _is_reader(src):
            try:
                size = os.fstat(src.fileno()).st_size
            except (AttributeError, OSError, ValueError, io.UnsupportedOperation):
                return 0, ""
            name = getattr(src, "name", "")
            return size, name if isinstance(name, str) else ""
        return 0, ""

    def name(self) -> str:
        """The file name behind the source, or '' if it has none."""
        src = self.source
        if _is_path(src):
            path = os.fspath(src)
            try:
                with open(path, "rb"):
                    return path
            except OSError:
                return ""
        if _is_reader(src) and not isinstance(src, io.BytesIO):
            try:
                src.fileno()
            except (AttributeError, OSError, ValueError, io.UnsupportedOperation):
                return ""
            name = getattr(src, "name", "")
            return name if isinstance(name, str) else ""
        return ""

    def open_reader(self) -> BinaryIO:
        """Return a binary reader over the source.

        Paths are opened (the caller closes them), byte strings and buffers are
        wrapped in a fresh ``BytesIO``, other readables are returned as they are.
        """
        src = self.source
        if _is_path(src):
            return open(os.fspath(src), "rb")
        if _is_bytes(src):
            return io.BytesIO(bytes(src))
        if isinstance(src, io.BytesIO):
            return io.BytesIO(src.getvalue())
        if _is_reader(src):
            return src
        raise TypeError(f"cannot read from source of type {type(src).__name__}")


class Destination:
    """A sink that accepts writes at arbitrary offsets, in memory or in a file."""

    def __init__(self, path: Optional[PathType] = None, *, file: Optional[BinaryIO] = None) -> None:
        if path is not None and file is not None:
            raise ValueError("give either a path or a file, not both")
        if path is not None:
            fd = os.open(os.fspath(path), os.O_CREAT | os.O_RDWR, 0o666)
            file = os.fdopen(fd, "r+b")
        self._file = file
        self._data = bytearray()
        self._lock = threading.Lock()

    def write_at(self, data: bytes, offset: int) -> int:
        """Write ``data`` at ``offset``, growing the target as needed; return its length."""
        if offset < 0:
            raise ValueError("offset must not be negative")
        with self._lock:
            if self._file is not None:
                self._file.seek(offset)
                self._file.write(data)
                return len(data)
            end = offset + len(data)
            if end > len(self._data):
                self._data.extend(bytes(end - len(self._data)))
            self._data[offset:end] = data
            return len(data)

    def getvalue(self) -> bytes:
        """Everything written so far."""
        with self._lock:
            if self._file is not None:
                self._file.flush()
                self._file.seek(0)
                return self._file.read()
            return bytes(self._data)

    def close(self) -> None:
        """Close the underlying file, if any; closing twice is harmless."""
        if self._file is not None and not self._file.closed:
            self._file.close()

    def __enter__(self) -> "Destination":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()