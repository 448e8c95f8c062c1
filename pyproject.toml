[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autolab"
version = "0.1.0"
description = "Small command-line tools: a calculator, a matrix library, 3D point helpers and a restaurant menu bot."
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "matrix", "determinant", "geometry", "octant", "menu", "recommendation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
autolab-calculator = "autolab.calculator:main"
autolab-matrix = "autolab.matrix:main"
autolab-points = "autolab.points:main"
autolab-menubot = "autolab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["autolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
