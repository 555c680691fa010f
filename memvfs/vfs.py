"""Filesystem and node interfaces shared by every filesystem in the package."""

from __future__ import annotations

import abc
import enum
import weakref

from memvfs.structs import FileSystemInfo, VfsDirEntry, VfsNodeAttr, VfsNodeType


class ErrorKind(enum.Enum):
    """The kinds of failure a filesystem operation can report."""

    ALREADY_EXISTS = "entity already exists"
    DIRECTORY_NOT_EMPTY = "directory not empty"
    INVALID_INPUT = "invalid input parameter"
    IS_A_DIRECTORY = "is a directory"
    NOT_A_DIRECTORY = "not a directory"
    NOT_FOUND = "entity not found"
    PERMISSION_DENIED = "permission denied"
    UNSUPPORTED = "operation not supported"


class VfsError(Exception):
    """A filesystem operation failed; ``kind`` says why."""

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or kind.value)

    def __repr__(self) -> str:
        return f"VfsError({self.kind.name}: {self})"


class VfsOps(abc.ABC):
    """Operations on a whole filesystem."""

    _mount_path: str | None = None

    def mount(self, path: str, mount_point: VfsNodeOps) -> None:
        """Called when the filesystem is mounted at *path*."""
        self._mount_path = path

    def umount(self) -> None:
        """Called when the filesystem is unmounted."""
        self._mount_path = None

    def format(self) -> None:
        """Format the filesystem."""
        raise VfsError(ErrorKind.UNSUPPORTED)

    def statfs(self) -> FileSystemInfo:
        """Attributes of the filesystem."""
        raise VfsError(ErrorKind.UNSUPPORTED)

    @abc.abstractmethod
    def root_dir(self) -> VfsNodeOps:
        """The root directory of the filesystem."""


class VfsNodeOps:
    """Operations on a node (file or directory).

    Every operation has a default that fails; concrete nodes override what
    they support.
    """

    _open_count: int = 0
    _parent_ref: weakref.ReferenceType[VfsNodeOps] | None = None

    def open(self) -> None:
        """Called when the node is opened."""
        self._open_count += 1

    def release(self) -> None:
        """Called when the node is closed."""
        self._open_count = max(self._open_count - 1, 0)

    def get_attr(self) -> VfsNodeAttr:
        raise VfsError(ErrorKind.UNSUPPORTED)

    def read_at(self, offset: int, size: int) -> bytes:
        """Read up to *size* bytes starting at *offset*."""
        raise VfsError(ErrorKind.INVALID_INPUT)

    def write_at(self, offset: int, data: bytes) -> int:
        """Write *data* at *offset* and return the number of bytes written."""
        raise VfsError(ErrorKind.INVALID_INPUT)

    def fsync(self) -> None:
        raise VfsError(ErrorKind.INVALID_INPUT)

    def truncate(self, size: int) -> None:
        raise VfsError(ErrorKind.INVALID_INPUT)

    def parent(self) -> VfsNodeOps | None:
        """The parent directory, or ``None`` for files and roots."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def lookup(self, path: str) -> VfsNodeOps:
        raise VfsError(ErrorKind.UNSUPPORTED)

    def create(self, path: str, ty: VfsNodeType) -> None:
        """Create a node at *path*; succeeds silently if it already exists."""
        raise VfsError(ErrorKind.UNSUPPORTED)

    def remove(self, path: str) -> None:
        raise VfsError(ErrorKind.UNSUPPORTED)

    def read_dir(self, start_idx: int, count: int) -> list[VfsDirEntry]:
        """Return at most *count* entries starting at index *start_idx*."""
        raise VfsError(ErrorKind.UNSUPPORTED)

    def rename(self, src_path: str, dst_path: str) -> None:
        raise VfsError(ErrorKind.UNSUPPORTED)


class DirNodeDefaults(VfsNodeOps):
    """Base for directories: file operations fail with ``IS_A_DIRECTORY``."""

    def read_at(self, offset: int, size: int) -> bytes:
        raise VfsError(ErrorKind.IS_A_DIRECTORY)

    def write_at(self, offset: int, data: bytes) -> int:
        raise VfsError(ErrorKind.IS_A_DIRECTORY)

    def fsync(self) -> None:
        raise VfsError(ErrorKind.IS_A_DIRECTORY)

    def truncate(self, size: int) -> None:
        raise VfsError(ErrorKind.IS_A_DIRECTORY)


class NonDirNodeDefaults(VfsNodeOps):
    """Base for non-directories: directory operations fail with ``NOT_A_DIRECTORY``."""

    def lookup(self, path: str) -> VfsNodeOps:
        raise VfsError(ErrorKind.NOT_A_DIRECTORY)

    def create(self, path: str, ty: VfsNodeType) -> None:
        raise VfsError(ErrorKind.NOT_A_DIRECTORY)

    def remove(self, path: str) -> None:
        raise VfsError(ErrorKind.NOT_A_DIRECTORY)

    def read_dir(self, start_idx: int, count: int) -> list[VfsDirEntry]:
        raise VfsError(ErrorKind.NOT_A_DIRECTORY)