[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hiddenpickle"
version = "0.1.0"
description = "Intro splash and main menu for the Hidden Pickle game"
requires-python = ">=3.10"
keywords = ["game", "menu", "pygame", "intro", "splash"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hiddenpickle = "hiddenpickle.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hiddenpickle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
