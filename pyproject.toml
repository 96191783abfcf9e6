[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cdmanager"
version = "0.1.0"
description = "Burn-list, CD-TEXT language, capacity, progress and drive-status helpers for an audio CD manager focused on Japanese CD-TEXT."
requires-python = ">=3.10"
dependencies = []
keywords = ["cd", "cd-text", "audio-cd", "burning", "japanese", "toc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: CD Audio :: CD Writing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cdmanager"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
