[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gaplayouts"
version = "0.1.0"
description = "Tiling window layouts with configurable outer and inner gaps, plus colour themes"
requires-python = ">=3.10"
dependencies = []
keywords = ["tiling", "window-manager", "layout", "gaps", "themes"]
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
    "Topic :: Desktop Environment :: Window Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gaplayouts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
