[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dvbtune"
version = "0.1.0"
description = "DVB tuning helpers: frontend data model, LNB types, satellite lists, rotor configuration parsing and repetition error correction"
requires-python = ">=3.10"
dependencies = []
keywords = ["dvb", "satellite", "lnb", "rotor", "tuning", "vdr", "crc32"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dvbtune"]

[tool.pytest.ini_options]
addopts = "-ra"
