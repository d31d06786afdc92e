[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thorkit"
version = "0.1.0"
description = "Helpers for 2D games: timers, random numbers, input names, event systems, resource holders, animations, particles and shapes"
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "particles", "animation", "resources", "timer", "events", "shapes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["thorkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
