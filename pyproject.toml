[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "avltrees"
version = "0.1.0"
description = "Binary search trees and self-balancing AVL trees with an ASCII tree printer"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "binary search tree", "bst", "data structures", "balanced tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
avltrees-demo = "avltrees.demo:main"
avltrees-equal-paths = "avltrees.equal_paths:main"

[tool.setuptools.packages.find]
include = ["avltrees*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
