[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aboutmig"
version = "0.1.6"
description = "Store info about yourself!"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "notes", "personal", "json", "storage"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aboutmig = "aboutmig.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aboutmig"]

[tool.pytest.ini_options]
addopts = "-ra"
