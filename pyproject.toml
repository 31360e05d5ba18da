[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "longshell"
version = "0.1.0"
description = "Generate shell aliases and environment variable settings from a TOML file."
requires-python = ">=3.11"
dependencies = []
keywords = ["shell", "alias", "environment", "toml", "bash", "zsh", "fish", "powershell", "nushell"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
long = "longshell.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["longshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
