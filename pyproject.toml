[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parcdistractii"
version = "0.1.0"
description = "Amusement park model: attractions, staff, visitors and tickets, with access checks and revenue statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["amusement park", "simulation", "management", "tickets"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: Romanian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["parcdistractii"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
