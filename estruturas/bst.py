"""Árvore binária de busca de inteiros, sem valores repetidos."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass
class Node:
    """Nó da árvore com sua chave e subárvores."""

    key: int
    left: Node | None = None
    right: Node | None = None


def subtree_height(node: Node | None) -> int:
    """Altura da subárvore; uma subárvore vazia tem altura -1."""
    if node is None:
        return -1
    return max(subtree_height(node.left), subtree_height(node.right)) + 1


def _min_node(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _remove(node: Node | None, value: int) -> Node | None:
    if node is None:
        return None
    if value < node.key:
        node.left = _remove(node.left, value)
    elif value > node.key:
        node.right = _remove(node.right, value)
    elif node.left is not None and node.right is not None:
        successor = _min_node(node.right)
        node.key = successor.key
        node.right = _remove(node.right, successor.key)
    else:
        return node.left if node.left is not None else node.right
    return node


def _preorder(node: Node | None) -> Iterator[int]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Node | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


def _postorder(node: Node | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.key


class BinarySearchTree:
    """Árvore binária de busca; inserir um valor já presente não faz nada."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def insert(self, value: int) -> None:
        """Insere o valor, ignorando repetidos."""
        if self.root is None:
            self.root = Node(value)
            return
        node = self.root
        while True:
            if value < node.key:
                if node.left is None:
                    node.left = Node(value)
                    return
                node = node.left
            elif value > node.key:
                if node.right is None:
                    node.right = Node(value)
                    return
                node = node.right
            else:
                return

    def remove(self, value: int) -> None:
        """Remove o valor; um nó com dois filhos recebe o menor da direita."""
        self.root = _remove(self.root, value)

    def find(self, value: int) -> Node | None:
        """Nó que contém o valor, ou None."""
        node = self.root
        while node is not None and node.key != value:
            node = node.left if value < node.key else node.right
        return node

    def height(self, value: int) -> int:
        """Altura da subárvore cuja raiz tem o valor dado."""
        node = self.find(value)
        if node is None:
            raise KeyError(value)
        return subtree_height(node)

    def preorder(self) -> Iterator[int]:
        return _preorder(self.root)

    def inorder(self) -> Iterator[int]:
        return _inorder(self.root)

    def postorder(self) -> Iterator[int]:
        return _postorder(self.root)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.find(value) is not None


MENU = (
    "\nEscolha uma opcao \n\n"
    "1. Inserir\n"
    "2. Remover\n"
    "3. Altura da subarvore\n"
    "4. Imprimir em pre-ordem\n"
    "5. Imprimir em ordem\n"
    "6. Imprimir em pos-ordem\n"
    "0. Encerrar\n"
    "Escolha: "
)


def _ler(prompt: str) -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    linha = sys.stdin.readline()
    if linha == "":
        raise EOFError
    return linha.strip()


def _ler_int(prompt: str) -> int | None:
    try:
        return int(_ler(prompt))
    except ValueError:
        return None


def _chaves(chaves: Iterator[int]) -> str:
    return "".join(f"{chave} " for chave in chaves)


def main(argv: Sequence[str] | None = None) -> int:
    """Menu interativo da árvore binária de busca."""
    argparse.ArgumentParser(
        prog="bst", description="Árvore binária de busca."
    ).parse_args(argv)
    arvore = BinarySearchTree()
    try:
        while True:
            escolha = _ler_int(MENU)
            if escolha in (1, 2, 3):
                prompt = {
                    1: "Insira um valor a inserir: ",
                    2: "Insira o valor a ser removido: ",
                    3: "Digite o valor da raiz da subarvore: ",
                }[escolha]
                valor = _ler_int(prompt)
                if valor is None:
                    sys.stdout.write("Valor invalido!\n")
                elif escolha == 1:
                    arvore.insert(valor)
                elif escolha == 2:
                    arvore.remove(valor)
                else:
                    try:
                        altura = arvore.height(valor)
                    except KeyError:
                        sys.stdout.write("Valor nao esta na arvore.\n")
                    else:
                        sys.stdout.write(
                            f"Altura da subarvore com raiz {valor}: {altura}\n"
                        )
            elif escolha == 4:
                sys.stdout.write(f"Pre-ordem: {_chaves(arvore.preorder())}\n")
            elif escolha == 5:
                sys.stdout.write(f"Em ordem: {_chaves(arvore.inorder())}\n")
            elif escolha == 6:
                sys.stdout.write(f"Pos-ordem: {_chaves(arvore.postorder())}\n")
            elif escolha == 0:
                sys.stdout.write("Finalizado.\n")
                return 0
            else:
                sys.stdout.write("Opcao foi invalida!\n")
    except EOFError:
        return 0