[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodemobility"
version = "0.1.0"
description = "Mobility models, position allocators and geographic coordinate conversions for network node simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["mobility", "simulation", "networking", "waypoint", "geodesy", "ecef"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nodemobility"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
