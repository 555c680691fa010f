"""In-memory virtual filesystem interfaces with device and RAM filesystems."""

__version__ = "0.1.1"
__all__ = ["devfs", "devices", "path", "ramfile", "ramfs", "structs", "vfs"]