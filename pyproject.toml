[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poligon"
version = "2.0.0"
description = "A small shooting-range arcade game with classic and advanced modes"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "shooting", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Turkish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
poligon = "poligon.app:main"

[tool.hatch.build.targets.wheel]
packages = ["poligon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
