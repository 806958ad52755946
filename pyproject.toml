[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ddotelmap"
version = "0.1.0"
description = "Map OpenTelemetry resource attributes to Datadog tags, telemetry sources and host metadata payloads"
requires-python = ">=3.10"
keywords = [
    "opentelemetry",
    "datadog",
    "otlp",
    "host metadata",
    "tags",
    "monitoring",
]
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
    "Typing :: Typed",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ddotelmap-licenses = "ddotelmap.licenses.generate:main"

[tool.hatch.build.targets.wheel]
packages = ["ddotelmap"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
