[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdb-exporter"
version = "0.1.0"
description = "Prometheus exporter that turns FoundationDB status JSON into gauges"
requires-python = ">=3.10"
dependencies = []
keywords = ["foundationdb", "prometheus", "metrics", "exporter", "monitoring"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: No Input/Output (Daemon)",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fdb-exporter = "fdb_exporter.provider:main"

[tool.hatch.build.targets.wheel]
packages = ["fdb_exporter"]

[tool.pytest.ini_options]
addopts = "-ra"
