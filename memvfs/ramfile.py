"""Regular files of the RAM filesystem."""

from __future__ import annotations

import threading

from memvfs.structs import VfsNodeAttr
from memvfs.vfs import NonDirNodeDefaults


class FileNode(NonDirNodeDefaults):
    """A regular file whose content is held in memory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._content = bytearray()

    def get_attr(self) -> VfsNodeAttr:
        with self._lock:
            return VfsNodeAttr.new_file(len(self._content), 0)

    def truncate(self, size: int) -> None:
        """Shrink the file to *size* bytes, or grow it with zero bytes."""
        with self._lock:
            if size < len(self._content):
                del self._content[size:]
            else:
                self._content.extend(bytes(size - len(self._content)))

    def read_at(self, offset: int, size: int) -> bytes:
        with self._lock:
            return bytes(self._content[offset : offset + size])

    def write_at(self, offset: int, data: bytes) -> int:
        end = offset + len(data)
        with self._lock:
            if end > len(self._content):
                self._content.extend(bytes(end - len(self._content)))
            self._content[offset:end] = data
        return len(data)