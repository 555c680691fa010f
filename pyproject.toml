[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memvfs"
version = "0.1.1"
description = "In-memory virtual filesystem interfaces with a device filesystem and a RAM filesystem"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "vfs", "ramfs", "devfs", "in-memory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["memvfs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
