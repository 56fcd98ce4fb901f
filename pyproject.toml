[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dragontyping"
version = "1.0.0"
description = "A typing game: type each word before its timer runs out or lose a life."
requires-python = ">=3.10"
keywords = ["game", "typing", "pygame", "dragon", "words"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dragontyping = "dragontyping.game:main"

[tool.hatch.build.targets.wheel]
packages = ["dragontyping"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
