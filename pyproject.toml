[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cantina"
version = "0.1.0"
description = "Interactive canteen point-of-sale: product catalog, student registry, daily-limited sales and a restock list"
requires-python = ">=3.10"
dependencies = []
keywords = ["canteen", "point-of-sale", "inventory", "restock", "school"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cantina = "cantina.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cantina"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
