[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ulister"
version = "0.1.0"
description = "A directory listing tool with columns, long format, colours, sorting and recursion"
requires-python = ">=3.10"
dependencies = []
keywords = ["ls", "directory", "listing", "filesystem", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ulister = "ulister.listing:main"

[tool.hatch.build.targets.wheel]
packages = ["ulister"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
