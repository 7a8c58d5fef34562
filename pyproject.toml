[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skullrunner"
version = "0.1.0"
description = "A small side-scrolling platformer with tile maps, a jumping and dashing player, skull enemies, scenes and a renderer that records draw calls."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game",
    "platformer",
    "side-scroller",
    "tilemap",
    "collision",
    "linear-algebra",
    "scene",
    "wave",
]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skullrunner"]

[tool.hatch.build.targets.sdist]
include = ["skullrunner", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
