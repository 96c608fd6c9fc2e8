[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "notifyflow"
version = "0.1.0"
description = "A concurrent notification pipeline: produce, process, rate-limit, dispatch and simulate sending, with a recorded history."
requires-python = ">=3.10"
dependencies = []
keywords = ["notifications", "pipeline", "channels", "rate-limiting", "concurrency", "threads"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
notifyflow = "notifyflow.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["notifyflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
