"""A device filesystem: a fixed tree of directories holding device nodes."""

from __future__ import annotations

import itertools
import logging
import threading
import weakref
from collections.abc import Iterator

from memvfs.structs import VfsDirEntry, VfsNodeAttr, VfsNodeType
from memvfs.vfs import DirNodeDefaults, ErrorKind, VfsError, VfsNodeOps, VfsOps

log = logging.getLogger(__name__)


def _split_path(path: str) -> tuple[str, str | None]:
    trimmed = path.lstrip("/")
    name, sep, rest = trimmed.partition("/")
    return (name, rest) if sep else (name, None)


class DirNode(DirNodeDefaults):
    """A directory of the device filesystem.

    Nodes are added when the tree is built; they cannot be created or
    removed through the filesystem interface.
    """

    def __init__(self, parent: VfsNodeOps | None = None) -> None:
        self._lock = threading.Lock()
        self._children: dict[str, VfsNodeOps] = {}
        self._parent: weakref.ReferenceType[VfsNodeOps] | None = None
        self.set_parent(parent)

    def set_parent(self, parent: VfsNodeOps | None) -> None:
        """Point ``..`` at *parent* (held weakly), or at nothing."""
        self._parent = weakref.ref(parent) if parent is not None else None

    def mkdir(self, name: str) -> DirNode:
        """Create a subdirectory named *name* and return it."""
        node = DirNode(self)
        with self._lock:
            self._children[name] = node
        return node

    def add(self, name: str, node: VfsNodeOps) -> None:
        """Add *node* to this directory under *name*."""
        with self._lock:
            self._children[name] = node

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
        log.debug("create %s at devfs: %s", ty, path)
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
            raise VfsError(
                ErrorKind.PERMISSION_DENIED, "nodes cannot be created in devfs"
            )

    def remove(self, path: str) -> None:
        log.debug("remove at devfs: %s", path)
        name, rest = _split_path(path)
        if rest is None:
            raise VfsError(
                ErrorKind.PERMISSION_DENIED, "nodes cannot be removed from devfs"
            )
        if name in ("", "."):
            self.remove(rest)
        elif name == "..":
            self._parent_or_not_found().remove(rest)
        else:
            self._child(name).remove(rest)


class DeviceFileSystem(VfsOps):
    """A filesystem whose tree of device nodes is built in code."""

    def __init__(self) -> None:
        self._mount_parent: VfsNodeOps | None = None
        self._root = DirNode()

    def mkdir(self, name: str) -> DirNode:
        """Create a subdirectory of the root directory."""
        return self._root.mkdir(name)

    def add(self, name: str, node: VfsNodeOps) -> None:
        """Add *node* to the root directory."""
        self._root.add(name, node)

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