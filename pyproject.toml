[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simlog"
version = "1.8.37"
description = "Leveled, colored logger with daily log files and callbacks, plus byte records for sim-racing peripherals"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "logger", "colors", "log-rotation", "sim-racing", "telemetry"]
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
packages = ["simlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
