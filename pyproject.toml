[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emsystem"
version = "0.1.0"
description = "Interactive console program for registering employees and computing their final salaries"
requires-python = ">=3.10"
dependencies = []
keywords = ["employees", "payroll", "salary", "console", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
emsystem = "emsystem.app:main"

[tool.hatch.build.targets.wheel]
packages = ["emsystem"]

[tool.pytest.ini_options]
addopts = "-ra"
