[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isomesh"
version = "0.1.0"
description = "Implicit surfaces, signed and directed distance fields, and feature placement for isosurface meshing"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "isosurface",
    "implicit surface",
    "signed distance field",
    "csg",
    "feature placement",
    "qef",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["isomesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
