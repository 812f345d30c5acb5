[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nxdnkit"
version = "0.1.0"
description = "Building blocks for NXDN reflector and parrot services on amateur radio networks"
requires-python = ">=3.10"
dependencies = []
keywords = ["nxdn", "ham radio", "amateur radio", "reflector", "parrot", "nxcore", "udp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nxdnkit"]

[tool.pytest.ini_options]
addopts = "-ra"
