[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raredonor"
version = "0.1.0"
description = "Sort blood donor phenotype runs into rare antigen profiles with their plate locations"
requires-python = ">=3.10"
dependencies = []
keywords = ["blood bank", "phenotype", "rare donor", "antigen", "plate map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
raredonor = "raredonor.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["raredonor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
