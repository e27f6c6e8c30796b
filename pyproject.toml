[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chull"
version = "0.1.0"
description = "Convex hull area by Graham scan, with a command interpreter and several TCP server variants"
requires-python = ">=3.10"
dependencies = []
keywords = ["convex hull", "graham scan", "geometry", "area", "reactor", "proactor", "server"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chull-area = "chull.area:main"
chull-interactive = "chull.interactive:main"
chull-select-server = "chull.select_server:main"
chull-reactor-server = "chull.reactor_server:main"
chull-threaded-server = "chull.threaded_server:main"
chull-proactor-server = "chull.proactor_server:main"

[tool.hatch.build.targets.wheel]
packages = ["chull"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
