[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curvepass"
version = "0.1.0"
description = "Deterministic password derivation from a master key and an application name"
requires-python = ">=3.10"
dependencies = []
keywords = ["password", "generator", "deterministic", "sha3", "password-manager"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
curvepass = "curvepass.generator:main"

[tool.hatch.build.targets.wheel]
packages = ["curvepass"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
