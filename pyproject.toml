[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "argoslib"
version = "0.1.0"
description = "LED panel drawing and animations, a delta-updating LED subsystem and file-based home-position storage for competition robots"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "led", "animation", "panel", "sprite", "homing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["argoslib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
