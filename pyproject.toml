[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pcmmcops"
version = "0.1.0"
description = "Build and validate COPS (RFC 2748) messages and objects for PacketCable Multimedia"
requires-python = ">=3.10"
dependencies = []
keywords = ["cops", "pcmm", "packetcable", "rfc2748", "policy", "protocol"]
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
    "Topic :: Communications",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pcmmcops"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
