[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "firstsound"
version = "0.0.1"
description = "Sine-wave oscillators, ranged parameters with listeners, and a stereo sine-tone processor"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["audio", "sine", "oscillator", "synthesis", "dsp", "parameters"]
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
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["firstsound"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
