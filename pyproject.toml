[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typedblob"
version = "0.1.0"
description = "Serialize and deserialize packets of typed values (integers, floats, strings, nested vectors) in a compact little-endian binary format"
requires-python = ">=3.10"
dependencies = []
keywords = ["serialization", "binary", "protocol", "little-endian", "packet"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
typedblob = "typedblob.serializator:main"

[tool.hatch.build.targets.wheel]
packages = ["typedblob"]

[tool.pytest.ini_options]
addopts = "-ra"
