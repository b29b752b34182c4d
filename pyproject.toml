[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "golio"
version = "0.1.0"
description = "Client for the League of Legends game API and the Data Dragon static data service"
requires-python = ">=3.10"
dependencies = []
keywords = ["league of legends", "riot", "data dragon", "api client"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["golio"]

[tool.pytest.ini_options]
addopts = "-ra"
