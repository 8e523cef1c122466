[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vibevj"
version = "0.1.0"
description = "Building blocks for audio-reactive visuals: FFT band analysis, procedural meshes, materials, cameras and a node-graph scene editor model"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["vj", "visuals", "audio-reactive", "fft", "mesh", "node-graph", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vibevj"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
