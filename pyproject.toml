[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reqdepgraph"
version = "0.1.0"
description = "Extract requirement parent/child links from YAML blocks in Markdown and write a dependency report"
requires-python = ">=3.10"
dependencies = []
keywords = ["requirements", "traceability", "dependency", "markdown", "report"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reqdepgraph = "reqdepgraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["reqdepgraph"]

[tool.pytest.ini_options]
addopts = "-ra"
