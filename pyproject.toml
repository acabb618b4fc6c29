[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "randolib"
version = "0.1.0"
description = "Runtime helpers for load-time code randomization: FNV hashing, Robin Hood hash map, sorting, parsing, formatting, entropy and i386 relocation patching"
requires-python = ">=3.10"
keywords = ["randomization", "relocation", "fnv", "hashmap", "qsort", "strtol", "x86", "elf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["randolib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
