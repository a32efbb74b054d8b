[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jamctl"
version = "0.1.0"
description = "Control state for a multiband audio mastering console: graphic EQ, ganged compressors, crossover solo/bypass, labels and context help"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "mastering", "equalizer", "compressor", "crossover", "mixer"]
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
    "Topic :: Multimedia :: Sound/Audio :: Mixers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jamctl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
