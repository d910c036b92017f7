"""Lista de compras; o produto adicionado por último aparece primeiro."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

PRODUTO_MAX = 19

TITULO = "\t\t\t\t--- Lista de Compras ---\n\n"

MENU = (
    TITULO
    + "Escolha uma opção:\n\n"
    "1. Adicionar produto\n"
    "2. Imprimir a lista\n"
    "3. Sair\n\n"
    "Digite a opção: "
)


@dataclass(frozen=True)
class Item:
    """Produto da lista com a quantidade desejada."""

    produto: str
    quantidade: int


class ListaCompras:
    """Itens de compra, do mais recente ao mais antigo."""

    def __init__(self) -> None:
        self._itens: deque[Item] = deque()

    def adicionar(self, item: Item) -> None:
        """Coloca o item no início da lista."""
        self._itens.appendleft(item)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._itens)

    def __len__(self) -> int:
        return len(self._itens)


def formatar_lista(lista: ListaCompras) -> str:
    """Texto com todos os itens da lista, ou o aviso de lista vazia."""
    if len(lista) == 0:
        return "A lista de compras está vazia!"
    linhas = [TITULO]
    for item in lista:
        linhas.append(f"Produto: {item.produto}\t\t\tQuantidade: {item.quantidade}\n")
    return "".join(linhas)


def _ler(prompt: str) -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    linha = sys.stdin.readline()
    if linha == "":
        raise EOFError
    return linha.rstrip("\r\n")


def _ler_item() -> Item:
    produto = _ler("\nQual produto você deseja adicionar à lista de compras? ")
    quantidade = int(_ler("\nQual a quantidade? ").strip())
    return Item(produto[:PRODUTO_MAX], quantidade)


def main(argv: Sequence[str] | None = None) -> int:
    """Menu interativo da lista de compras."""
    argparse.ArgumentParser(
        prog="compras", description="Lista de compras."
    ).parse_args(argv)
    lista = ListaCompras()
    try:
        while True:
            try:
                escolha = int(_ler(MENU).strip())
            except ValueError:
                escolha = -1
            if escolha == 1:
                try:
                    lista.adicionar(_ler_item())
                except ValueError:
                    sys.stdout.write("\nQuantidade inválida!\n")
            elif escolha == 2:
                sys.stdout.write(formatar_lista(lista))
                if len(lista):
                    sys.stdout.write("\nAperte ENTER para continuar.")
                _ler("")
            elif escolha == 3:
                sys.stdout.write("\nSaindo...\n")
                return 0
            else:
                sys.stdout.write("\nOpção inválida! Tente novamente.\n")
                return 0
    except EOFError:
        return 0