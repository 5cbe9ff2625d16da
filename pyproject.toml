[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stackui"
version = "0.1.0"
description = "Stack-based view trees with bounding-box layout and state-changing click handlers"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "layout", "views", "vstack", "state"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stackui = "stackui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["stackui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
