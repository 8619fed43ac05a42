[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mos6502model"
version = "0.1.0"
description = "A model of the MOS 6502 processor: registers, status flags, opcode table, memory interface and stack"
requires-python = ">=3.10"
dependencies = []
keywords = ["6502", "mos6502", "emulator", "cpu", "opcode", "8-bit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mos6502model"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
