[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "ironbrew"
version = "0.1.0"
description = "Ironbrew Inn: a small terminal roguelike of ale, ammo and zombies"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "game", "terminal", "zombies", "ascii"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ironbrew = "ironbrew.main:main"

[tool.setuptools.packages.find]
include = ["ironbrew*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
