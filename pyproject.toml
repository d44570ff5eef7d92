[build-system]
requires = ["hatchling>=1.18"]
build-backend = "hatchling.build"

[project]
name = "unixkit"
version = "0.1.0"
description = "Small Unix-style command-line utilities (sort, grep, cut, shell, site mirror, NTP time), text helpers and design pattern demos"
requires-python = ">=3.10"
dependencies = [
    "psutil>=5.9",
    "beautifulsoup4>=4.12",
]
keywords = [
    "sort",
    "grep",
    "cut",
    "shell",
    "wget",
    "mirror",
    "ntp",
    "anagrams",
    "cli",
    "design-patterns",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
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
test = [
    "pytest>=7.4",
]

[project.scripts]
unixkit-ntptime = "unixkit.ntptime:main"
unixkit-anagrams = "unixkit.anagrams:main"
unixkit-sort = "unixkit.sort:main"
unixkit-cut = "unixkit.cut:main"
unixkit-grep = "unixkit.grep:main"
unixkit-shell = "unixkit.shell:main"
unixkit-wget = "unixkit.crawler:main"
unixkit-patterns-creational = "unixkit.patterns.creational:main"
unixkit-patterns-structural = "unixkit.patterns.structural:main"
unixkit-patterns-behavioral = "unixkit.patterns.behavioral:main"

[tool.hatch.build.targets.wheel]
packages = ["unixkit"]

[tool.hatch.build.targets.sdist]
include = [
    "unixkit",
    "tests",
    "pyproject.toml",
]

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
