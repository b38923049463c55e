[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "midiseq"
version = "0.1.0"
description = "A tick-driven MIDI sequencer library that generates practice chords, intervals and note lines"
requires-python = ">=3.10"
dependencies = []
keywords = ["midi", "sequencer", "music", "chords", "ear-training", "guitar"]
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
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["midiseq"]

[tool.pytest.ini_options]
addopts = "-ra"
