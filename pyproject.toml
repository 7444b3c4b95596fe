[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timeping"
version = "0.1.0"
description = "A hashed time-wheel task scheduler with a pooled, intrusive task list"
requires-python = ">=3.10"
keywords = ["scheduler", "timewheel", "timer", "tasks", "intrusive-list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
timeping = "timeping.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["timeping"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
