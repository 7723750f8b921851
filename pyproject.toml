[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soundbench"
version = "0.1.0"
description = "Small toolkit for 16-bit PCM audio: WAV/PCM conversion, a voice band-pass filter and an in-memory recorder"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "wav", "pcm", "biquad", "filter", "recorder"]
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
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
    "Topic :: Multimedia :: Sound/Audio :: Capture/Recording",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
soundbench-convert = "soundbench.convert:main"

[tool.hatch.build.targets.wheel]
packages = ["soundbench"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
