[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "froglight-parse"
version = "0.1.0"
description = "Download, cache and parse Minecraft version data: manifests, blocks, entities, protocol and data-generator output."
requires-python = ">=3.10"
dependencies = [
    "httpx",
]
keywords = ["minecraft", "protocol", "parser", "game-data", "cache"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["froglight_parse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
