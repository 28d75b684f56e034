[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stagecraft"
version = "0.1.0"
description = "A small 2D game engine core: vectors, transforms and collisions, actors, levels, animation timing and keyboard state tracking."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "2d", "collision", "animation", "actor", "level"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stagecraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
