[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "benchreport"
version = "0.1.0"
description = "Turn benchmark JSON results into a Markdown comparison table"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "report", "markdown", "performance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
benchreport = "benchreport.report:main"

[tool.hatch.build.targets.wheel]
packages = ["benchreport"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
