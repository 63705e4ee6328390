[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lsysparse"
version = "1.0.0"
description = "Define Lindenmayer (L-)systems, check their input and expand them into turtle command strings."
requires-python = ">=3.10"
dependencies = []
keywords = ["l-system", "lindenmayer", "fractal", "rewriting", "grammar"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lsysparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
