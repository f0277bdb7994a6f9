[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algonotes"
version = "0.1.0"
description = "Small, readable implementations of classic algorithm exercises on numbers, sequences, strings and linked lists."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "linked-list",
    "sliding-window",
    "permutations",
    "bit-manipulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
    "Environment :: Console",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algonotes = "algonotes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algonotes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
