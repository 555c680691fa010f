import pytest

from memvfs.structs import VfsNodeType
from memvfs.vfs import (
    DirNodeDefaults,
    ErrorKind,
    NonDirNodeDefaults,
    VfsError,
    VfsNodeOps,
    VfsOps,
)


class _Fs(VfsOps):
    def __init__(self):
        self.root = DirNodeDefaults()

    def root_dir(self):
        return self.root


def _kind_of(func, *args):
    with pytest.raises(VfsError) as excinfo:
        func(*args)
    return excinfo.value.kind


def test_vfs_error_carries_kind_and_message():
    err = VfsError(ErrorKind.NOT_FOUND)
    assert err.kind is ErrorKind.NOT_FOUND
    assert str(err) == ErrorKind.NOT_FOUND.value
    custom = VfsError(ErrorKind.INVALID_INPUT, "bad offset")
    assert str(custom) == "bad offset"
    assert custom.kind is ErrorKind.INVALID_INPUT


def test_vfs_ops_defaults():
    fs = _Fs()
    root = fs.root_dir()
    assert VfsOps.mount(fs, "/", root) is None
    assert VfsOps.umount(fs) is None
    assert _kind_of(VfsOps.format, fs) is ErrorKind.UNSUPPORTED
    assert _kind_of(VfsOps.statfs, fs) is ErrorKind.UNSUPPORTED
    assert _kind_of(root.read_at, 0, 1) is ErrorKind.IS_A_DIRECTORY


def test_vfs_ops_requires_root_dir():
    with pytest.raises(TypeError):
        VfsOps()


def test_node_defaults_file_ops_invalid_input():
    node = VfsNodeOps()
    assert _kind_of(node.read_at, 0, 4) is ErrorKind.INVALID_INPUT
    assert _kind_of(node.write_at, 0, b"ab") is ErrorKind.INVALID_INPUT
    assert _kind_of(node.fsync) is ErrorKind.INVALID_INPUT
    assert _kind_of(node.truncate, 0) is ErrorKind.INVALID_INPUT


def test_node_defaults_dir_ops_unsupported():
    node = VfsNodeOps()
    assert _kind_of(node.get_attr) is ErrorKind.UNSUPPORTED
    assert _kind_of(node.lookup, "a") is ErrorKind.UNSUPPORTED
    assert _kind_of(node.create, "a", VfsNodeType.FILE) is ErrorKind.UNSUPPORTED
    assert _kind_of(node.remove, "a") is ErrorKind.UNSUPPORTED
    assert _kind_of(node.read_dir, 0, 4) is ErrorKind.UNSUPPORTED
    assert _kind_of(node.rename, "a", "b") is ErrorKind.UNSUPPORTED


def test_node_defaults_open_release_parent():
    node = VfsNodeOps()
    assert node.parent() is None
    assert node.open() is None
    assert node.release() is None


def test_dir_defaults_reject_file_ops():
    node = DirNodeDefaults()
    assert _kind_of(node.read_at, 0, 4) is ErrorKind.IS_A_DIRECTORY
    assert _kind_of(node.write_at, 0, b"x") is ErrorKind.IS_A_DIRECTORY
    assert _kind_of(node.fsync) is ErrorKind.IS_A_DIRECTORY
    assert _kind_of(node.truncate, 3) is ErrorKind.IS_A_DIRECTORY
    assert _kind_of(node.lookup, "x") is ErrorKind.UNSUPPORTED


def test_non_dir_defaults_reject_dir_ops():
    node = NonDirNodeDefaults()
    assert _kind_of(node.lookup, "x") is ErrorKind.NOT_A_DIRECTORY
    assert _kind_of(node.create, "x", VfsNodeType.DIR) is ErrorKind.NOT_A_DIRECTORY
    assert _kind_of(node.remove, "x") is ErrorKind.NOT_A_DIRECTORY
    assert _kind_of(node.read_dir, 0, 1) is ErrorKind.NOT_A_DIRECTORY
    assert _kind_of(node.read_at, 0, 1) is ErrorKind.INVALID_INPUT