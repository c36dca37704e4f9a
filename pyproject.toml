[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labsim"
version = "0.1.0"
description = "Simulations of classic operating-system exercises: a restaurant with cooks and waiters, a boating park and demand paging."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "simulation",
    "synchronization",
    "semaphores",
    "threads",
    "demand paging",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labsim-paging = "labsim.paging:main"
labsim-boating = "labsim.boating:main"
labsim-restaurant = "labsim.restaurant:main"

[tool.hatch.build.targets.wheel]
packages = ["labsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
