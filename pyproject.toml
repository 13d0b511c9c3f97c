[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foxwarren"
version = "0.1.0"
description = "Predator-prey grid simulation of foxes and grass, open to more species, with a population chart"
requires-python = ">=3.10"
keywords = ["simulation", "predator-prey", "ecosystem", "artificial-life", "grid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Life",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
foxwarren = "foxwarren.app:main"

[tool.hatch.build.targets.wheel]
packages = ["foxwarren"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
