[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "litegame"
version = "0.1.0"
description = "A small entity-component game framework with OBJ model loading, texture loading and a fixed-step game loop."
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["game", "ecs", "entity-component-system", "obj", "game-loop", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["litegame"]

[tool.hatch.build.targets.sdist]
include = [
    "litegame",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
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
