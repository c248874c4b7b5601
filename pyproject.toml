[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labsuite"
version = "0.1.0"
description = "Small command-driven simulations and algorithms: battles, event scheduling, graphs, a library desk and polynomials"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphs", "scheduling", "polynomials", "simulation", "karatsuba", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labsuite-battle = "labsuite.avengers:main"
labsuite-events = "labsuite.events:main"
labsuite-graph-queries = "labsuite.graph_algorithms:main"
labsuite-graph = "labsuite.undirected:main"
labsuite-library = "labsuite.library:main"
labsuite-poly = "labsuite.polynomial:main"

[tool.hatch.build.targets.wheel]
packages = ["labsuite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
