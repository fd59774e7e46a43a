[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cobfield"
version = "0.1.0"
description = "Helpers for COBOL-style fixed-width fields: delimited records, number conversion and parsing, scientific notation, hex encoding, tracing and environment pathnames."
requires-python = ">=3.10"
dependencies = []
keywords = ["cobol", "fixed-width", "csv", "pic", "scientific-notation", "records"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cobfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
