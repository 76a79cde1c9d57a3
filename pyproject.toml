[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cppstart"
version = "0.1.0"
description = "Small examples: shapes, bounded linked lists, binary search and a record layout printout."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked-list", "binary-search", "shapes", "data-structures", "teaching"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cppstart-linked-list = "cppstart.linked_list:main"
cppstart-binary-search = "cppstart.binary_search:main"
cppstart-basics = "cppstart.basics:main"

[tool.hatch.build.targets.wheel]
packages = ["cppstart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
