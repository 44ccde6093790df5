[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "icingaclient"
version = "0.1.0"
description = "Client for the Icinga 2 REST API, with an in-memory mock for tests"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["icinga", "icinga2", "monitoring", "rest", "api", "client", "mock"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["icingaclient"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
