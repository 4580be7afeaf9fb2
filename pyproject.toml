[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webspider"
version = "0.1.0"
description = "Building blocks for a web crawler: crawl queues, scope rules, deduplication, endpoint extraction and result output"
requires-python = ">=3.10"
keywords = ["crawler", "spider", "web", "scope", "endpoints", "url"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Information Technology",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyyaml>=6.0",
    "beautifulsoup4>=4.11",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["webspider"]

[tool.pytest.ini_options]
addopts = "-ra"
