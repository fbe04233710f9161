[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ymlescape"
version = "0.1.0"
description = "Backslash escaping for strings embedded in YAML documents"
requires-python = ">=3.10"
keywords = ["yaml", "escape", "backslash", "text"]
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
    "Topic :: Text Processing :: Filters",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ymlescape"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
