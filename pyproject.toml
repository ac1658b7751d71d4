[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termbus"
version = "0.1.0"
description = "Building blocks for a terminal SSH workspace: session models, a plugin RPC protocol and SDK, and text-mode UI components."
requires-python = ">=3.10"
dependencies = []
keywords = ["ssh", "terminal", "tui", "plugins", "rpc", "tunnels", "sftp"]
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
    "Topic :: Internet",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termbus-plugin = "termbus.sdk.cli:main"
termbus-builtin-plugin = "termbus.plugins:main"

[tool.hatch.build.targets.wheel]
packages = ["termbus"]

[tool.hatch.build.targets.sdist]
include = ["termbus", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
