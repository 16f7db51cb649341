[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "homefin"
version = "0.1.0"
description = "Terminal tool for keeping household families, members, bank accounts and net worth in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["finance", "household", "net worth", "sqlite", "terminal", "bank accounts"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
homefin = "homefin.tui:main"

[tool.setuptools.packages.find]
include = ["homefin*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
