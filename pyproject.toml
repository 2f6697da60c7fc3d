[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threehalves"
version = "0.1.0"
description = "Monte Carlo pricing of European, barrier and Asian options under the 3/2 stochastic volatility model"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "option pricing",
    "monte carlo",
    "stochastic volatility",
    "3/2 model",
    "barrier option",
    "asian option",
    "bessel function",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
threehalves = "threehalves.app:main"

[tool.hatch.build.targets.wheel]
packages = ["threehalves"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
