[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "elvisui"
version = "0.1.0"
description = "A virtual UI tree with widgets, layouts and styles, serialized to HTML and CSS"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "virtual-dom", "widgets", "html", "css", "layout"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["elvisui"]

[tool.pytest.ini_options]
addopts = "-ra"
