[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cborkit"
version = "0.1.0"
description = "A minimal CBOR writer that appends encoded values to a byte buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["cbor", "rfc8949", "serialization", "encoding", "binary"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cborkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
