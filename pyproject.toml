[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skalog"
version = "0.1.0"
description = "Pattern-based logging with level ranges, per-class levels, output filters, multi-loggers and asynchronous dispatch"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "logger", "log pattern", "async logging", "multi-logger"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skalog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
