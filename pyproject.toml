[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tacradio"
version = "1.0.0"
description = "Toolkit-independent front-panel models for a vintage tactical radio: themes, knob, S-meter and decoder panel"
requires-python = ">=3.10"
dependencies = []
keywords = ["radio", "sdr", "s-meter", "ctcss", "rds", "ads-b", "theme", "knob"]
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
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tacradio"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
