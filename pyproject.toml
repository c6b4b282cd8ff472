[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphdata"
version = "0.1.0"
description = "Build weighted graphs from binary ID-pair files and report connected components, shortest distances and minimum spanning tree costs"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "adjacency list", "connected components", "dijkstra", "prim", "minimum spanning tree"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphdata = "graphdata.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphdata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
