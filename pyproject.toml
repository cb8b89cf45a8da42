[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bigkit"
version = "0.1.0"
description = "Arbitrary-size decimal integers plus a few small helpers: a linked list, pairs, a bitset and binary record files."
requires-python = ">=3.10"
dependencies = []
keywords = ["bigint", "arbitrary precision", "karatsuba", "linked list", "bitset", "binary io"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
bigkit-list-demo = "bigkit.linkedlist:main"

[tool.hatch.build.targets.wheel]
packages = ["bigkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
