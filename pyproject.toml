[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roadrecords"
version = "0.1.0"
description = "Read, sort, search and update binary electronic-map road record files"
requires-python = ">=3.10"
dependencies = []
keywords = ["gis", "road", "electronic map", "binary records", "sorting", "search"]
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
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
roadrecords = "roadrecords.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["roadrecords"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
