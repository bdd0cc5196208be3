[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparsekrig"
version = "0.1.0"
description = "Covariance functions with parameter transforms and analytic gradients, plus spatial subsampling designs, for Gaussian process kriging"
requires-python = ">=3.10"
keywords = ["gaussian process", "kriging", "covariance", "geostatistics", "spatial design"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
]

[tool.hatch.build.targets.wheel]
packages = ["sparsekrig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
