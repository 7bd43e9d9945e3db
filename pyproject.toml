[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "stockshow"
version = "1.0.0"
description = "A small stock quote watcher for the Shanghai and Shenzhen markets"
requires-python = ">=3.10"
dependencies = []
keywords = ["stocks", "quotes", "finance", "watchlist", "shanghai", "shenzhen"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stockshow = "stockshow.app:main"

[tool.setuptools.packages.find]
include = ["stockshow*"]

[tool.pytest.ini_options]
addopts = "-ra"
