[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pingkit"
version = "0.1.0"
description = "Models and services for transaction checks, webhook integrations and organization user management of an uptime monitoring service"
requires-python = ">=3.10"
dependencies = []
keywords = ["monitoring", "uptime", "transaction-checks", "webhooks", "graphql", "users"]
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pingkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
