[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fishfrenzy"
version = "0.1.0"
description = "Game-logic core for an arcade fish-eating game: entities, collisions, spawning, frenzy, scoring and schooling"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "fish", "flocking", "scoring", "particles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fishfrenzy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
