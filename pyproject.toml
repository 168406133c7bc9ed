[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "remotecache"
version = "0.1.0"
description = "Building blocks for a remote build cache: request path parsing, ActionResult validation, temp files, idle timers, upload workers and help formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["build", "cache", "remote-cache", "remote-execution", "bazel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["remotecache"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
