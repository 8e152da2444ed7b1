[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logicchips"
version = "0.1.0"
description = "Truth-table models of common 4000- and 7400-series logic ICs"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "gates", "7400", "4000", "truth table", "digital", "ttl", "cmos"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logicchips = "logicchips.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["logicchips"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
