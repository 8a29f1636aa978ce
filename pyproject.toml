[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pqcat"
version = "0.1.0"
description = "Classical attacks on code-based cryptosystems: information set decoding and Goppa decoding experiments"
requires-python = ">=3.10"
keywords = [
    "code-based cryptography",
    "post-quantum",
    "information set decoding",
    "goppa",
    "mceliece",
    "cryptanalysis",
    "benchmark",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pqcat = "pqcat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pqcat"]

[tool.hatch.build.targets.sdist]
include = ["pqcat", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
