[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shouldupdate"
version = "0.1.0"
description = "Track application versions and check GitHub releases for available updates."
requires-python = ">=3.11"
keywords = ["github", "releases", "versions", "updates", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control",
    "Topic :: Utilities",
]
dependencies = [
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shouldupdate = "shouldupdate.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shouldupdate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
