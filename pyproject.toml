[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zakupki"
version = "0.1.0"
description = "Download, store and parse 44-FZ procurement notice print forms into structured tender records"
requires-python = ">=3.10"
keywords = ["procurement", "tenders", "44-FZ", "html", "parser", "mongodb"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
    "Topic :: Text Processing :: Markup :: HTML",
]
dependencies = [
    "beautifulsoup4",
    "requests",
    "pymongo>=4.2",
    "redis",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
zakupki-search-url = "zakupki.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zakupki"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
