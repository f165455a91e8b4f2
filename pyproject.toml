[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eposuser"
version = "0.1.0"
description = "User-space building blocks of a small teaching operating system: fixed-point maths, C-style library helpers, a chunk heap, a software frame buffer and animated sorting."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "operating-system", "fixed-point", "heap", "framebuffer", "sorting", "vesa"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["eposuser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
