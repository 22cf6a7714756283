[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kvhttpd"
version = "0.1.0"
description = "A small threaded HTTP server that keeps key-value pairs submitted through HTML forms"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "key-value", "forms", "html"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: No Input/Output (Daemon)",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kvhttpd = "kvhttpd.server:main"

[tool.hatch.build.targets.wheel]
packages = ["kvhttpd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
