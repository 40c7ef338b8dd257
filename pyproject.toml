[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridpack"
version = "0.1.0"
description = "Grid-based inventory, coin purse, bank, loot, keyring, merchant and equipment logic for role-playing games"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "rpg", "grid", "coins", "equipment", "merchant", "loot", "keyring"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gridpack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
