[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketapps"
version = "0.1.0"
description = "A handful of small terminal programs: number guessing, calculator, tic-tac-toe, to-do list and library manager."
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "games", "tic-tac-toe", "calculator", "todo", "library"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pocket-guess = "pocketapps.guessing:main"
pocket-calc = "pocketapps.calculator:main"
pocket-tictactoe = "pocketapps.tictactoe:main"
pocket-todo = "pocketapps.todo:main"
pocket-library = "pocketapps.library:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketapps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
