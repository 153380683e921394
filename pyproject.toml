[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geocalc"
version = "0.1.0"
description = "Area, perimeter, surface and volume calculations for common 2D and 3D figures"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "area", "perimeter", "volume", "surface", "calculator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
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
geocalc = "geocalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["geocalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
