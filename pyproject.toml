[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mariogame"
version = "0.1.0"
description = "A small side-scrolling platform game model with a randomly generated, endless world"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "side-scroller", "arcade", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
mariogame = "mariogame.controllers:main"

[tool.hatch.build.targets.wheel]
packages = ["mariogame"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
