[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mixlab"
version = "0.1.0"
description = "Simulate ingredient mixes for a crafting game and search for the most valuable combination"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "crafting", "optimizer", "mixing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mixlab = "mixlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mixlab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
