[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bankdesk"
version = "0.1.0"
description = "Keyboard-driven console bank desk with Caesar-enciphered customer storage and backups, plus three small console exercises"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bank",
    "accounts",
    "console",
    "caesar-cipher",
    "backup",
    "quicksort",
    "binary-search",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Financial and Insurance Industry",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bankdesk = "bankdesk.app:main"
bankdesk-desert = "bankdesk.desert:main"
bankdesk-names = "bankdesk.name_sorter:main"
bankdesk-powers = "bankdesk.powers:main"

[tool.hatch.build.targets.wheel]
packages = ["bankdesk"]

[tool.hatch.build.targets.sdist]
include = ["bankdesk", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
