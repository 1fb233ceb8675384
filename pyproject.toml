[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structlabs"
version = "0.1.0"
description = "Data-structure exercises: long division of decimal numbers, a car catalogue with sorting, sparse matrices and bracket checking with stacks"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "sorting", "sparse-matrix", "stack", "long-division", "brackets"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
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
structlabs-divide = "structlabs.bigdivide:main"
structlabs-autos = "structlabs.autocli:main"
structlabs-matrix = "structlabs.matrixcli:main"
structlabs-brackets = "structlabs.brackets:main"

[tool.hatch.build.targets.wheel]
packages = ["structlabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
