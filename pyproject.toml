[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gravitysim"
version = "0.1.0"
description = "A small two-dimensional N-body gravity simulation with a pygame viewer"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["gravity", "n-body", "simulation", "physics", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gravitysim = "gravitysim.window:main"

[tool.hatch.build.targets.wheel]
packages = ["gravitysim"]

[tool.pytest.ini_options]
addopts = "-ra"
