[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csclip"
version = "0.1.0"
description = "Step-by-step Cohen-Sutherland line clipping with an interactive Tk visualiser"
requires-python = ">=3.10"
dependencies = []
keywords = ["cohen-sutherland", "line clipping", "computer graphics", "bresenham", "animation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
csclip = "csclip.app:main"

[tool.hatch.build.targets.wheel]
packages = ["csclip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
