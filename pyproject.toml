[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pktcraft"
version = "0.1.0"
description = "Serialise TCP and UDP headers, parse MAC, IPv4 and hex values, and compute Internet checksums"
requires-python = ">=3.10"
dependencies = []
keywords = ["packet", "tcp", "udp", "ipv4", "mac", "checksum", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pktcraft = "pktcraft.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pktcraft"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
