[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timetravel"
version = "0.1.0"
description = "Rename files so that the date found in their names is written as YYYY-MM-DD"
requires-python = ">=3.10"
dependencies = []
keywords = ["rename", "date", "filenames", "files", "organize"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
time-travel = "timetravel.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["timetravel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
