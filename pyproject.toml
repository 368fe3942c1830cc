[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webrouting"
version = "0.1.0"
description = "Building blocks for HTTP clients and servers: auth scopes, routes, frames, progress tracking and session pooling."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "web", "client", "server", "routing", "server-sent-events", "websocket"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["webrouting"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
