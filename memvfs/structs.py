"""Node attributes, permissions, types and directory entries."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)

DIR_ENTRY_NAME_MAX = 63


@dataclass(frozen=True)
class FileSystemInfo:
    """Filesystem attributes (currently carries no information)."""


class VfsNodePerm(enum.IntFlag):
    """Node (file/directory) permission mode."""

    OWNER_READ = 0o400
    OWNER_WRITE = 0o200
    OWNER_EXEC = 0o100
    GROUP_READ = 0o40
    GROUP_WRITE = 0o20
    GROUP_EXEC = 0o10
    OTHER_READ = 0o4
    OTHER_WRITE = 0o2
    OTHER_EXEC = 0o1

    @classmethod
    def default_file(cls) -> VfsNodePerm:
        """Default file permission, ``0o666``."""
        return cls(0o666)

    @classmethod
    def default_dir(cls) -> VfsNodePerm:
        """Default directory permission, ``0o755``."""
        return cls(0o755)

    def mode(self) -> int:
        """The raw permission bits."""
        return int(self)

    def rwx_buf(self) -> str:
        """Nine-character ``rwx`` representation, e.g. ``rwxr-xr-x``."""
        flags = (
            (self.OWNER_READ, "r"),
            (self.OWNER_WRITE, "w"),
            (self.OWNER_EXEC, "x"),
            (self.GROUP_READ, "r"),
            (self.GROUP_WRITE, "w"),
            (self.GROUP_EXEC, "x"),
            (self.OTHER_READ, "r"),
            (self.OTHER_WRITE, "w"),
            (self.OTHER_EXEC, "x"),
        )
        return "".join(ch if flag in self else "-" for flag, ch in flags)

    def owner_readable(self) -> bool:
        return self.OWNER_READ in self

    def owner_writable(self) -> bool:
        return self.OWNER_WRITE in self

    def owner_executable(self) -> bool:
        return self.OWNER_EXEC in self


_TYPE_CHARS = {
    0o1: "p",
    0o2: "c",
    0o4: "d",
    0o6: "b",
    0o10: "-",
    0o12: "l",
    0o14: "s",
}


class VfsNodeType(enum.IntEnum):
    """Node (file/directory) type."""

    FIFO = 0o1
    CHAR_DEVICE = 0o2
    DIR = 0o4
    BLOCK_DEVICE = 0o6
    FILE = 0o10
    SYMLINK = 0o12
    SOCKET = 0o14

    def is_file(self) -> bool:
        return self is VfsNodeType.FILE

    def is_dir(self) -> bool:
        return self is VfsNodeType.DIR

    def is_symlink(self) -> bool:
        return self is VfsNodeType.SYMLINK

    def is_block_device(self) -> bool:
        return self is VfsNodeType.BLOCK_DEVICE

    def is_char_device(self) -> bool:
        return self is VfsNodeType.CHAR_DEVICE

    def is_fifo(self) -> bool:
        return self is VfsNodeType.FIFO

    def is_socket(self) -> bool:
        return self is VfsNodeType.SOCKET

    def as_char(self) -> str:
        """Single-character representation, as shown by ``ls -l``."""
        return _TYPE_CHARS[self.value]


@dataclass
class VfsNodeAttr:
    """Node (file/directory) attributes."""

    perm: VfsNodePerm
    file_type: VfsNodeType
    size: int = 0
    blocks: int = 0

    @classmethod
    def new_file(cls, size: int, blocks: int) -> VfsNodeAttr:
        """Attributes of a regular file with the default file permission."""
        return cls(VfsNodePerm.default_file(), VfsNodeType.FILE, size, blocks)

    @classmethod
    def new_dir(cls, size: int, blocks: int) -> VfsNodeAttr:
        """Attributes of a directory with the default directory permission."""
        return cls(VfsNodePerm.default_dir(), VfsNodeType.DIR, size, blocks)

    def is_file(self) -> bool:
        return self.file_type.is_file()

    def is_dir(self) -> bool:
        return self.file_type.is_dir()


@dataclass(frozen=True)
class VfsDirEntry:
    """A directory entry: a name of at most 63 bytes and a node type."""

    name: str = ""
    entry_type: VfsNodeType = VfsNodeType.FILE

    def __post_init__(self) -> None:
        length = len(self.name.encode())
        if length > DIR_ENTRY_NAME_MAX:
            log.warning(
                "directory entry name too long: %d > %d", length, DIR_ENTRY_NAME_MAX
            )
            raise ValueError(
                f"directory entry name too long: {length} > {DIR_ENTRY_NAME_MAX}"
            )

    @classmethod
    def default(cls) -> VfsDirEntry:
        """An empty entry of type file."""
        return cls()

    def name_as_bytes(self) -> bytes:
        """The entry name as bytes, up to the first NUL byte."""
        raw = self.name.encode()
        return raw.split(b"\0", 1)[0]