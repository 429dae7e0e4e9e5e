[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glasscockpit"
version = "0.0.1"
description = "Navigation databases, Mercator coordinates, raster map tiles and render-object basics for glass cockpit displays"
requires-python = ">=3.10"
keywords = ["avionics", "glass cockpit", "navigation", "flight simulation", "mercator", "navaid", "map tiles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: GIS",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["glasscockpit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
