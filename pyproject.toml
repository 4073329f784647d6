[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multilaunch"
version = "1.0.0"
description = "Arrange programs on a scene, give them start priorities and linked files, and launch them together as one working session."
requires-python = ">=3.10"
dependencies = []
keywords = ["launcher", "session", "process", "workspace", "startup", "priority"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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

[tool.hatch.build.targets.wheel]
packages = ["multilaunch"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
