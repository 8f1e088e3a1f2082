[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcdatapack"
version = "0.1.0"
description = "Compiler back end that lowers bytecode for a small C-like language to Minecraft datapack functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "minecraft",
    "datapack",
    "mcfunction",
    "compiler",
    "bytecode",
    "scoreboard",
]
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
    "Topic :: Software Development :: Compilers",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mcdatapack"]

[tool.hatch.build.targets.sdist]
include = ["mcdatapack", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
