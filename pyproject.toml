[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slimtools"
version = "1.0.0"
description = "Small desktop utilities: a status line generator, a file filter and incremental menu matching"
requires-python = ">=3.10"
keywords = ["status", "statusbar", "menu", "stest", "system-information"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slstatus = "slimtools.slstatus:main"
stest = "slimtools.stest:main"

[tool.hatch.build.targets.wheel]
packages = ["slimtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
