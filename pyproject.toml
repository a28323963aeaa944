[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tlib"
version = "0.1.0"
description = "Game and media utility library: math helpers, ranges, containers, grids, fixed timesteps, rectangle packing, input state, system queries and a file embedder"
requires-python = ">=3.10"
keywords = ["game", "utilities", "containers", "rect-packing", "input", "embedding", "fps"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tlib-embed = "tlib.embedder:main"

[tool.hatch.build.targets.wheel]
packages = ["tlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
