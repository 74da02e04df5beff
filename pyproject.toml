[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubcaster"
version = "0.1.0"
description = "A raycasting first-person maze explorer driven by .cub scene files"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "maze", "pygame", "first-person"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubcaster = "cubcaster.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cubcaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
