[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mspot"
version = "0.1.0"
description = "Building blocks for an M17-only hotspot: frame layouts, ring buffers, timers, UDP and serial modem ports"
requires-python = ">=3.10"
dependencies = []
keywords = ["m17", "hotspot", "repeater", "ham-radio", "mmdvm", "digital-voice"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mspot"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
