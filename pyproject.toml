[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic graph, search and sorting algorithms with small interactive command-line drivers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "bfs",
    "dfs",
    "dijkstra",
    "kruskal",
    "prim",
    "n-queens",
    "selection-sort",
    "chatbot",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-bfs = "algolab.bfs:main"
algolab-dfs = "algolab.dfs:main"
algolab-chatbot = "algolab.chatbot:main"
algolab-dijkstra = "algolab.dijkstra:main"
algolab-kruskal = "algolab.kruskal:main"
algolab-nqueen = "algolab.nqueen:main"
algolab-prim = "algolab.prim:main"
algolab-selection-sort = "algolab.selection_sort:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
addopts = "-ra"
