[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estruturas"
version = "0.1.0"
description = "Estruturas de dados de estudo com menus de terminal: agenda, árvore binária de busca, estoque, fila, lista de compras, lista telefônica, pilha de processos e algoritmos de diferentes complexidades."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "estruturas de dados",
    "data structures",
    "arvore binaria de busca",
    "binary search tree",
    "fila",
    "pilha",
    "ordenacao",
    "complexidade",
    "educacao",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
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
estruturas-agenda = "estruturas.agenda:main"
estruturas-bst = "estruturas.bst:main"
estruturas-estoque = "estruturas.estoque:main"
estruturas-fila = "estruturas.fila:main"
estruturas-compras = "estruturas.compras:main"
estruturas-telefones = "estruturas.telefones:main"
estruturas-pilha = "estruturas.pilha:main"
estruturas-algoritmos = "estruturas.algoritmos:main"

[tool.hatch.build.targets.wheel]
packages = ["estruturas"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
