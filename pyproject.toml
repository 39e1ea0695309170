[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sateayam"
version = "0.1.0"
description = "Category pages, a home page and MongoDB storage for a small shop catalogue, built on Flask"
requires-python = ">=3.10"
keywords = ["flask", "mongodb", "catalogue", "shop", "crud"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
    "pymongo",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sateayam"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
