[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yaav"
version = "1.2.3"
description = "Autonomous vehicle simulator: geometry, collision detection, simulated hardware and physics of a vacuum cleaner in a room"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "simulation",
    "autonomous vehicle",
    "robotics",
    "collision detection",
    "geometry",
    "physics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yaav"]

[tool.hatch.build.targets.sdist]
include = ["yaav", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
