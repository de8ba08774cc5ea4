[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelseek"
version = "0.1.0"
description = "Pure-Python bitmaps, BMP reading and writing, and colour and sub-image search"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitmap", "bmp", "image search", "template matching", "color search", "base64"]
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
    "Topic :: Scientific/Engineering :: Image Recognition",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pixelseek"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
