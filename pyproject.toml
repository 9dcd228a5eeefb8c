[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpusched"
version = "0.1.0"
description = "Simulate CPU scheduling algorithms (FCFS, SJF, priority, round-robin, preemptive variants) and compare their results"
requires-python = ">=3.10"
dependencies = []
keywords = ["cpu", "scheduling", "simulation", "operating-systems", "round-robin", "gantt"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpusched = "cpusched.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cpusched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
