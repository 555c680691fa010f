"""Character devices that behave like ``/dev/null`` and ``/dev/zero``."""

from __future__ import annotations

from memvfs.structs import VfsNodeAttr, VfsNodePerm, VfsNodeType
from memvfs.vfs import NonDirNodeDefaults


def _char_device_attr() -> VfsNodeAttr:
    return VfsNodeAttr(VfsNodePerm.default_file(), VfsNodeType.CHAR_DEVICE, 0, 0)


class NullDev(NonDirNodeDefaults):
    """Reads return nothing and all writes are discarded."""

    def get_attr(self) -> VfsNodeAttr:
        return _char_device_attr()

    def read_at(self, offset: int, size: int) -> bytes:
        return b""

    def write_at(self, offset: int, data: bytes) -> int:
        return len(data)

    def truncate(self, size: int) -> None:
        return None


class ZeroDev(NonDirNodeDefaults):
    """Reads return zero bytes and all writes are discarded."""

    def get_attr(self) -> VfsNodeAttr:
        return _char_device_attr()

    def read_at(self, offset: int, size: int) -> bytes:
        return bytes(size)

    def write_at(self, offset: int, data: bytes) -> int:
        return len(data)

    def truncate(self, size: int) -> None:
        return None