[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filmvert"
version = "0.1.0"
description = "Film negative tooling: Lanczos image resizing, grading shader sources and parameters, render status and file dialogs"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["film", "negative", "lanczos", "resize", "glsl", "shader", "color-grading"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["filmvert"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
