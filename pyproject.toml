[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "casekit"
version = "0.1.0"
description = "Table-driven test cases and a runner that narrates each case with pass/fail marks"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "test cases", "table-driven", "unit testing", "test narration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing :: Unit",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["casekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
