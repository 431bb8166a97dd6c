[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shresolve"
version = "0.0.1"
description = "Building blocks for resolving shell-script command references to absolute paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "bash", "nix", "resolver", "rewriter", "build"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shresolve"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
