"""A RAM filesystem: directories and regular files kept in memory."""

from __future__ import annotations

import itertools
import logging
import threading
import weakref
from collections.abc import Iterator

from memvfs.ramfile import FileNode
from memvfs.structs import VfsDirEntry, VfsNodeAttr, VfsNodeType
from memvfs.vfs import DirNodeDefaults, ErrorKind, VfsError, VfsNodeOps, VfsOps

log = logging.getLogger(__name__)


def _split_path(path: str) -> tuple[str, str | None]:
    trimmed = path.lstrip("/")
    name, sep, rest = trimmed.partition("/")
    return (name, rest) if sep else (name, None)


class DirNode(DirNodeDefaults):
    """A directory of the RAM filesystem."""

    def __init__(self, parent: VfsNodeOps | None = None) -> None:
        self._lock = threading.Lock()
        self._children: dict[str, VfsNodeOps] = {}
        self._parent: weakref.ReferenceType[VfsNodeOps] | None = None
        self.set_parent(parent)

    def set_parent(self, parent: VfsNodeOps | None) -> None:
        """Point ``..`` at *parent* (held weakly), or at nothing."""
        self._parent = weakref.ref(parent) if parent is not None else None

    def get_entries(self) -> list[str]:
        """Names of all entries in this directory, in sorted order."""
        with self._lock:
            return sorted(self._children)

    def exist(self, name: str) -> bool:
        """Whether an entry called *name* exists in this directory."""
        with self._lock:
            return name in self._children

    def create_node(self, name: str, ty: VfsNodeType) -> None:
        """Create a file or directory called *name* in this directory."""
        if ty is VfsNodeType.FILE:
            node: VfsNodeOps = FileNode()
        elif ty is VfsNodeType.DIR:
            node = DirNode(self)
        else:
            raise VfsError(ErrorKind.UNSUPPORTED)
        with self._lock:
            if name in self._children:
                log.error("AlreadyExists %s", name)
                raise VfsError(ErrorKind.ALREADY_EXISTS)
            self._children[name] = node

    def remove_node(self, name: str) -> None:
        """Remove the entry *name*; a directory must be empty."""
        with self._lock:
            node = self._children.get(name)
            if node is None:
                raise VfsError(ErrorKind.NOT_FOUND)
            if isinstance(node, DirNode) and node.get_entries():
                raise VfsError(ErrorKind.DIRECTORY_NOT_EMPTY)
            del self._children[name]

    def _child(self, name: str) -> VfsNodeOps:
        with self._lock:
            node = self._children.get(name)
        if node is None:
            raise VfsError(ErrorKind.NOT_FOUND)
        return node

    def _parent_or_not_found(self) -> VfsNodeOps:
        parent = self.parent()
        if parent is None:
            raise VfsError(ErrorKind.NOT_FOUND)
        return parent

    def get_attr(self) -> VfsNodeAttr:
        return VfsNodeAttr.new_dir(4096, 0)

    def parent(self) -> VfsNodeOps | None:
        return self._parent() if self._parent is not None else None

    def lookup(self, path: str) -> VfsNodeOps:
        name, rest = _split_path(path)
        if name in ("", "."):
            node: VfsNodeOps = self
        elif name == "..":
            node = self._parent_or_not_found()
        else:
            node = self._child(name)
        return node.lookup(rest) if rest is not None else node

    def _entries(self) -> Iterator[VfsDirEntry]:
        yield VfsDirEntry(".", VfsNodeType.DIR)
        yield VfsDirEntry("..", VfsNodeType.DIR)
        with self._lock:
            children = sorted(self._children.items())
        for name, node in children:
            yield VfsDirEntry(name, node.get_attr().file_type)

    def read_dir(self, start_idx: int, count: int) -> list[VfsDirEntry]:
        return list(itertools.islice(self._entries(), start_idx, start_idx + count))

    def create(self, path: str, ty: VfsNodeType) -> None:
        log.debug("create %s at ramfs: %s", ty, path)
        name, rest = _split_path(path)
        if rest is not None:
            if name in ("", "."):
                self.create(rest, ty)
            elif name == "..":
                self._parent_or_not_found().create(rest, ty)
            else:
                self._child(name).create(rest, ty)
        elif name in ("", ".", ".."):
            return
        else:
            self.create_node(name, ty)

    def remove(self, path: str) -> None:
        log.debug("remove at ramfs: %s", path)
        name, rest = _split_path(path)
        if rest is not None:
            if name in ("", "."):
                self.remove(rest)
            elif name == "..":
                self._parent_or_not_found().remove(rest)
            else:
                self._child(name).remove(rest)
        elif name in ("", ".", ".."):
            raise VfsError(ErrorKind.INVALID_INPUT, "cannot remove '.' or '..'")
        else:
            self.remove_node(name)


class RamFileSystem(VfsOps):
    """A filesystem held entirely in memory."""

    def __init__(self) -> None:
        self._mount_parent: VfsNodeOps | None = None
        self._root = DirNode()

    def root_dir_node(self) -> DirNode:
        """The root directory node."""
        return self._root

    def mount(self, path: str, mount_point: VfsNodeOps) -> None:
        parent = mount_point.parent()
        if parent is None:
            self._root.set_parent(None)
            return
        if self._mount_parent is None:
            self._mount_parent = parent
        self._root.set_parent(self._mount_parent)

    def root_dir(self) -> DirNode:
        return self._root