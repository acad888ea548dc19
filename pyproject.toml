[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calatorie"
version = "0.1.0"
description = "A text-mode survival journey game: gather loot, craft food, upgrade clothing and pay to cross rivers on the way to the town."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text-adventure", "role-playing", "survival", "crafting", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Romanian",
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
calatorie = "calatorie.meniu:main"

[tool.hatch.build.targets.wheel]
packages = ["calatorie"]

[tool.hatch.build.targets.sdist]
include = ["calatorie", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
