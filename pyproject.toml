[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thoth"
version = "0.1.0a1"
description = "HTTP building blocks: URLs, query parameters, headers, methods and status codes"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "url", "headers", "query", "percent-encoding"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["thoth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
