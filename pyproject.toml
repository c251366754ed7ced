[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dolkit"
version = "0.1.0"
description = "ELF to DOL conversion and small runtime data structures for GameCube-era game libraries"
requires-python = ">=3.10"
dependencies = []
keywords = ["gamecube", "dol", "elf", "powerpc", "build-tools"]
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
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
elf2dol = "dolkit.elf2dol:main"

[tool.hatch.build.targets.wheel]
packages = ["dolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
