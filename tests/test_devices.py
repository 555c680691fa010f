import pytest

from memvfs.devices import NullDev, ZeroDev
from memvfs.structs import VfsNodePerm, VfsNodeType
from memvfs.vfs import ErrorKind, VfsError


@pytest.mark.parametrize("cls", [NullDev, ZeroDev])
def test_attributes(cls):
    attr = cls().get_attr()
    assert attr.file_type is VfsNodeType.CHAR_DEVICE
    assert not attr.is_dir()
    assert attr.size == 0
    assert attr.blocks == 0
    assert attr.perm == VfsNodePerm.default_file()


def test_null_reads_nothing():
    dev = NullDev()
    assert dev.read_at(0, 32) == b""
    assert dev.read_at(100, 5) == b""


def test_zero_reads_zeros():
    dev = ZeroDev()
    data = dev.read_at(10, 32)
    assert len(data) == 32
    assert set(data) == {0}
    assert dev.read_at(0, 0) == b""


@pytest.mark.parametrize("cls", [NullDev, ZeroDev])
def test_writes_are_discarded(cls):
    dev = cls()
    payload = b"\x01" * 32
    assert dev.write_at(32, payload) == len(payload)
    assert dev.write_at(0, b"") == 0
    assert dev.truncate(7) is None
    assert dev.get_attr().size == 0


@pytest.mark.parametrize("cls", [NullDev, ZeroDev])
def test_directory_operations_fail(cls):
    dev = cls()
    assert dev.parent() is None
    for call in (
        lambda: dev.lookup("/"),
        lambda: dev.create("x", VfsNodeType.FILE),
        lambda: dev.remove("x"),
        lambda: dev.read_dir(0, 4),
    ):
        with pytest.raises(VfsError) as excinfo:
            call()
        assert excinfo.value.kind is ErrorKind.NOT_A_DIRECTORY