[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bincodec"
version = "0.1.0"
description = "Decoder for the compact bincode binary format, with configurable endianness, integer encoding and byte limits"
requires-python = ">=3.10"
dependencies = []
keywords = ["bincode", "binary", "deserialization", "decoding", "varint", "zigzag"]
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
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["bincodec"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
