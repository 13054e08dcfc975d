[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "funcviz"
version = "0.1.0"
description = "Plot mathematical functions of x typed as plain expressions, with discontinuity splitting and extremum markers"
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["plotting", "functions", "expression parser", "graph", "mathematics", "visualization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
funcviz = "funcviz.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["funcviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
