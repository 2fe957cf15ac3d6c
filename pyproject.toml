[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lawndefense"
version = "0.1.0"
description = "A lane-based tower defence game: plant defenders on the lawn and hold off waves of zombies."
requires-python = ">=3.10"
keywords = ["game", "tower-defense", "pygame", "strategy", "zombies", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lawndefense = "lawndefense.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lawndefense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
