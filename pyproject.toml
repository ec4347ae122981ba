[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsltocpp"
version = "0.1.0"
description = "Build a small contract syntax tree and emit it as C++ source code"
requires-python = ">=3.10"
dependencies = []
keywords = ["code generation", "c++", "dsl", "contract", "ast", "syntax tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsl-to-cpp = "dsltocpp.builder:main"

[tool.hatch.build.targets.wheel]
packages = ["dsltocpp"]

[tool.hatch.build.targets.sdist]
include = ["dsltocpp", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["dsltocpp"]
