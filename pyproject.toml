[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stilib"
version = "0.1.0"
description = "Small container toolkit: a growable array with element deleters, a bucketed hash map and owned/view string types"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "dynamic array", "hash map", "fnv1a", "string view"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stilib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
