[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noisegen"
version = "0.1.0"
description = "Deterministic hash-based randomness, tileable Perlin and Worley noise, wave-function-collapse tiling and small algebra types"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "noise",
    "perlin",
    "worley",
    "procedural",
    "wave-function-collapse",
    "quaternion",
    "complex",
    "matrix",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["noisegen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
