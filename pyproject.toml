[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "battlestar"
version = "1.0.0"
description = "A text-based dungeon role-playing game with an inventory, difficulty levels and save files"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "text-adventure", "dungeon", "inventory", "turn-based"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
battlestar = "battlestar.game:main"

[tool.setuptools.packages.find]
include = ["battlestar*"]

[tool.pytest.ini_options]
addopts = "-ra"
