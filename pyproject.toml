[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labutil"
version = "0.1.0"
description = "Teaching-kernel building blocks: Sv39 address arithmetic, ELF headers, a shell command parser and classic user utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-system",
    "risc-v",
    "sv39",
    "elf",
    "shell",
    "grep",
    "printf",
    "malloc",
    "education",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Education",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labutil-grep = "labutil.grep:main"

[tool.hatch.build.targets.wheel]
packages = ["labutil"]

[tool.hatch.build.targets.sdist]
include = ["labutil", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
