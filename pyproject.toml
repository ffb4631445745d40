[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "tillpoint"
version = "0.1.0"
description = "A small command-line point-of-sale till: menu items, categories, a sales cart, sales history in SQLite and HTML receipts."
requires-python = ">=3.10"
dependencies = []
keywords = ["point-of-sale", "pos", "till", "receipt", "sqlite", "menu", "cafe"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tillpoint = "tillpoint.cli:main"

[tool.setuptools.packages.find]
include = ["tillpoint*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
