[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scutil"
version = "2.0.0"
description = "Small utilities: string helpers, clocks, a joinable thread, a hashed timer wheel and a URI parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "timer", "timer-wheel", "uri", "thread", "clock"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scutil"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
