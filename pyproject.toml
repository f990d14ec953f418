[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termpopup"
version = "0.1.0"
description = "Centred popups, bordered panels and display-width text helpers for in-memory terminal cell buffers"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["terminal", "tui", "popup", "layout", "unicode", "display-width"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["termpopup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
