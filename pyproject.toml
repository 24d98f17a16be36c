[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixedbigint"
version = "0.1.0"
description = "Fixed-width big unsigned integers built from 64-bit limbs, with wrapping, checked and modular addition"
requires-python = ">=3.10"
dependencies = []
keywords = ["bigint", "integer", "cryptography", "fixed-width", "limb", "modular-arithmetic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["fixedbigint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
