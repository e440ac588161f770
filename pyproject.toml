[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "butterboard"
version = "0.1.0"
description = "Canvas node sizing, layout invariants and affordance numbering for visual breadboarding."
requires-python = ">=3.10"
dependencies = []
keywords = ["breadboard", "canvas", "layout", "computed-size", "ux", "wireframe"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["butterboard"]

[tool.hatch.build.targets.sdist]
include = ["butterboard", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
