[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kvstash"
version = "0.1.0"
description = "An in-memory key-value store with typed values, lists, hashes and key expiry"
requires-python = ">=3.10"
dependencies = []
keywords = ["key-value", "in-memory", "store", "cache", "ttl"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kvstash-demo = "kvstash.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["kvstash"]

[tool.pytest.ini_options]
addopts = "-ra"
