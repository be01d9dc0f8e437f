[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gapicrest"
version = "0.1.0"
description = "Protobuf descriptor model and helpers for working out the REST bindings, parameters, metadata and doc text of API client libraries"
requires-python = ">=3.10"
keywords = ["protobuf", "code generation", "rest", "http", "grpc", "gapic", "descriptors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Code Generators",
]
dependencies = [
    "markdown-it-py",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gapicrest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
