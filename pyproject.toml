[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "studentdesk"
version = "1.0.0"
description = "Keep a small plain-text register of students and their physics, chemistry and maths marks."
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "marks", "school", "records", "register"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studentdesk = "studentdesk.cli:main"

[tool.setuptools]
packages = ["studentdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
