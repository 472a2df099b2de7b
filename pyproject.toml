[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minixpm"
version = "0.1.0"
description = "XPM image reader with the X11 colour-name table, plus small text, number, byte and line-reading helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["xpm", "image", "pixmap", "x11", "colors", "parser"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minixpm"]

[tool.pytest.ini_options]
addopts = "-ra"
