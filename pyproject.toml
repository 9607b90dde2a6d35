[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meyvekes"
version = "0.1.0"
description = "A small fruit-cutting arcade game: cut falling watermelons and peel bananas before time runs out."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "fruit", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Turkish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
meyvekes = "meyvekes.app:main"

[tool.hatch.build.targets.wheel]
packages = ["meyvekes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
