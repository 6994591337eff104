[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rbviz"
version = "0.1.0"
description = "Interactive red-black tree visualiser and tester, with a plain binary search tree to compare against"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "red-black tree",
    "binary search tree",
    "data structures",
    "visualisation",
    "education",
    "profiling",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rbviz = "rbviz.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rbviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
