[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algotour"
version = "0.1.0"
description = "A guided tour of classic sequence algorithms applied to student grade data"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "heap", "sorting", "permutations", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
algotour = "algotour.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algotour"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
