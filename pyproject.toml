[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sorokit"
version = "0.1.0"
description = "Byte containers, hashing, ed25519 signature checks and authorization context types for smart-contract tooling"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["bytes", "contracts", "ed25519", "sha256", "authorization"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sorokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
