[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixpaint"
version = "0.1.0"
description = "A small raster paint program with pencil, eraser, colour and brush-size tools"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["paint", "drawing", "raster", "pygame", "image editor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pixpaint = "pixpaint.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pixpaint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
