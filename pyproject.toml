[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "relflow"
version = "0.1.0"
description = "Release, ReleasePlan and ReleasePlanAdmission resource models with status-condition tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["release", "pipeline", "conditions", "status", "resource models"]
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
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["relflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
