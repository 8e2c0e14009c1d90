[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetrirs"
version = "1.0.0"
description = "A falling-block puzzle game with a ghost piece, line clears and scoring, drawn with pygame."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tetrimino", "pygame", "falling blocks"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.gui-scripts]
tetrirs = "tetrirs.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tetrirs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
