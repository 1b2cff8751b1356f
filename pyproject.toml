[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptoleq"
version = "0.1.0"
description = "Paillier-style encryption of integers with fixed-width big-number helpers, modular inversion, factoring and memory cells"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "homomorphic-encryption",
    "paillier",
    "modular-arithmetic",
    "factorization",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cryptoleq"]

[tool.pytest.ini_options]
addopts = "-ra"
