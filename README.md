# memvfs

A small virtual filesystem layer that lives entirely in memory. It provides:

- `memvfs.vfs`: the node and filesystem interfaces (`VfsNodeOps`, `VfsOps`),
  the `VfsError` exception with its `kind` (an `ErrorKind`), and the base
  classes `DirNodeDefaults` and `NonDirNodeDefaults`. Directories built on
  `DirNodeDefaults` fail file operations (`read_at`, `write_at`, `fsync`,
  `truncate`) with `ErrorKind.IS_A_DIRECTORY`; nodes built on
  `NonDirNodeDefaults` fail directory operations (`lookup`, `create`,
  `remove`, `read_dir`) with `ErrorKind.NOT_A_DIRECTORY`.
- `memvfs.structs`: node attributes (`VfsNodeAttr`), permissions
  (`VfsNodePerm`, an `IntFlag` with `rwx_buf()` giving e.g. `rwxr-xr-x`),
  node types (`VfsNodeType`) and directory entries (`VfsDirEntry`).
- `memvfs.path`: `canonicalize()` for normalising paths.
- `memvfs.devfs` and `memvfs.devices`: a device filesystem
  (`DeviceFileSystem`) with the `NullDev` and `ZeroDev` character devices.
- `memvfs.ramfs` and `memvfs.ramfile`: a RAM filesystem (`RamFileSystem`)
  whose regular files are `FileNode` objects holding their bytes.

Every failing operation raises `VfsError`; inspect `err.kind` to see why.

## Installation

```
pip install memvfs
```

## Device filesystem

```python
from memvfs.devfs import DeviceFileSystem
from memvfs.devices import NullDev, ZeroDev

devfs = DeviceFileSystem()
devfs.add("null", NullDev())
devfs.add("zero", ZeroDev())
foo = devfs.mkdir("foo")
foo.add("f2", ZeroDev())

root = devfs.root_dir()
zero = root.lookup(".//./zero")
assert zero.read_at(0, 4) == b"\0\0\0\0"
assert root.lookup("null").read_at(0, 4) == b""
assert root.lookup("null").write_at(0, b"discarded") == 9
```

The tree is built in code with `mkdir()` and `add()`. Creating or removing
nodes through `create()` or `remove()` raises `VfsError` with kind
`ErrorKind.PERMISSION_DENIED` (creating `.`, `..` or an empty name succeeds,
since it already exists).

## RAM filesystem

```python
from memvfs.ramfs import RamFileSystem
from memvfs.structs import VfsNodeType
from memvfs.vfs import ErrorKind, VfsError

ramfs = RamFileSystem()
root = ramfs.root_dir()
root.create("foo", VfsNodeType.DIR)
root.create("foo/notes", VfsNodeType.FILE)

f = root.lookup("foo/notes")
f.write_at(0, b"hello")
assert f.read_at(0, 16) == b"hello"
assert f.get_attr().size == 5

try:
    root.remove("foo")
except VfsError as err:
    assert err.kind is ErrorKind.DIRECTORY_NOT_EMPTY
```

Only `VfsNodeType.FILE` and `VfsNodeType.DIR` can be created; other types
raise `ErrorKind.UNSUPPORTED`, and an existing name raises
`ErrorKind.ALREADY_EXISTS`. Removing `.` or `..` raises
`ErrorKind.INVALID_INPUT`. `RamFileSystem.root_dir_node().get_entries()`
lists the root's entry names in sorted order.

## Paths and directory listings

Paths given to `lookup()`, `create()` and `remove()` are resolved one
component at a time: repeated slashes and `.` are skipped, and `..` moves to
the parent directory (or raises `ErrorKind.NOT_FOUND` at a root with no
parent). `read_dir(start_idx, count)` returns a list of `VfsDirEntry`
objects: `.` and `..` first, then the children in sorted order.

```python
from memvfs.path import canonicalize

assert canonicalize("/path/./to//foo") == "/path/to/foo"
assert canonicalize("/./path/to/../bar.rs") == "/path/bar.rs"
assert canonicalize("./foo/./bar") == "foo/bar"
```

## Mounting

`mount(path, mount_point)` on either filesystem points the root's `..` at
the parent of `mount_point`, if it has one. The parent seen at the first such
mount is kept for later mounts.

## What it does not do

- Nothing is stored on disk; all content is lost when the objects go away.
- There is no mount table joining several filesystems into one tree.
- Symbolic links, `rename()`, `format()` and `statfs()` are not supported and
  raise `ErrorKind.UNSUPPORTED`.
- Directory entry names longer than 63 bytes are rejected by `VfsDirEntry`
  with `ValueError`.

## Running the tests

```
pip install "memvfs[test]"
pytest
```