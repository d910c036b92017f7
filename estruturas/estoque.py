"""Controle de estoque de produtos; o cadastro mais recente vem primeiro."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

DESCRICAO_MAX = 49

LINHA = "---------------------------------------------------------"


@dataclass
class Produto:
    """Produto do estoque."""

    codigo: int
    descricao: str
    quantidade: int
    valor: float


class Estoque:
    """Produtos cadastrados, do mais recente ao mais antigo."""

    def __init__(self) -> None:
        self._produtos: deque[Produto] = deque()

    def cadastrar(self, produto: Produto) -> None:
        """Coloca o produto no início do estoque."""
        self._produtos.appendleft(produto)

    def _indice(self, codigo: int) -> int:
        for indice, produto in enumerate(self._produtos):
            if produto.codigo == codigo:
                return indice
        raise KeyError(codigo)

    def consultar(self, codigo: int) -> Produto:
        """Primeiro produto com o código dado; KeyError se não houver."""
        return self._produtos[self._indice(codigo)]

    def remover(self, codigo: int) -> Produto:
        """Remove e devolve o primeiro produto com o código dado."""
        indice = self._indice(codigo)
        produto = self._produtos[indice]
        del self._produtos[indice]
        return produto

    def abaixo_do_volume(self, volume: int) -> list[Produto]:
        """Produtos com quantidade menor que o volume, do mais antigo ao mais recente."""
        return [p for p in reversed(self._produtos) if p.quantidade < volume]

    def __iter__(self) -> Iterator[Produto]:
        return iter(self._produtos)

    def __len__(self) -> int:
        return len(self._produtos)


def relatorio(produtos: Iterable[Produto]) -> str:
    """Relatório em texto dos produtos dados."""
    lista = list(produtos)
    if not lista:
        return "Lista vazia!\n"
    partes = [
        f"\n{LINHA}",
        "\n------------------Relatório de produtos------------------",
        f"\n{LINHA}\n",
    ]
    for numero, produto in enumerate(lista, 1):
        partes += [
            f"\n{LINHA}",
            f"\n------------------Produto[{numero}]------------------",
            f"\n{LINHA}\n",
            f"\nCódigo do produto: {produto.codigo}",
            f"\nDescrição do produto: {produto.descricao}",
            f"\nQuantidade do produto: {produto.quantidade}",
            f"\nCódigo do produto: {produto.codigo}",
            f"\nValor do produto: R$ {produto.valor:.2f}\n\n",
        ]
    return "".join(partes)


def _cabecalho(titulo: str) -> str:
    return f"\n{LINHA}\n------------------{titulo}------------------\n{LINHA}\n"


MENU = (
    "-------------------------------------------------------"
    "\n------------------Controle de Estoque------------------"
    "\n-------------------------------------------------------\n"
    "1- Cadastrar produtos\n"
    "2- Consultar produtos\n"
    "3- Relatório de produtos\n"
    "4- Consultar volume em estoque\n"
    "5- Remover produtos\n"
    "0- Sair\n"
    "\n-------------------------------------------------------\n"
    "Digite a opção desejada: "
)


def _ler(prompt: str) -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    linha = sys.stdin.readline()
    if linha == "":
        raise EOFError
    return linha.rstrip("\r\n")


def _ler_produto() -> Produto:
    codigo = int(_ler("\nDigite o código do produto: "))
    descricao = _ler("\nDigite uma descrição para o produto: ")[:DESCRICAO_MAX]
    quantidade = int(_ler("\nDigite a quantidade do produto: "))
    valor = float(_ler("\nDigite o valor do produto: ").replace(",", "."))
    return Produto(codigo, descricao, quantidade, valor)


def _executar(opcao: int, estoque: Estoque) -> None:
    if opcao == 1:
        estoque.cadastrar(_ler_produto())
    elif opcao == 2:
        sys.stdout.write(_cabecalho("Consulta de produtos"))
        codigo = int(_ler("Digite o código do produto: "))
        try:
            sys.stdout.write(relatorio([estoque.consultar(codigo)]))
        except KeyError:
            sys.stdout.write("\nProduto não cadastrado!\n\n")
    elif opcao == 3:
        sys.stdout.write(relatorio(estoque))
    elif opcao == 4:
        sys.stdout.write(_cabecalho("Consulta do volume em estoque"))
        volume = int(
            _ler("Digite o volume mínimo em estoque para filtrar os produtos: ")
        )
        baixos = estoque.abaixo_do_volume(volume)
        if baixos:
            sys.stdout.write(relatorio(baixos))
        else:
            sys.stdout.write("\nNenhum produto com volume abaixo foi encontrado!\n")
    elif opcao == 5:
        sys.stdout.write(_cabecalho("Remoção de produtos"))
        codigo = int(_ler("Digite o código do produto: "))
        try:
            estoque.remover(codigo)
        except KeyError:
            sys.stdout.write("\nProduto não cadastrado!")
        else:
            sys.stdout.write("\nProduto removido!\n")
    else:
        sys.stdout.write("\nOpção inválida!")


def main(argv: Sequence[str] | None = None) -> int:
    """Menu interativo do controle de estoque."""
    argparse.ArgumentParser(
        prog="estoque", description="Controle de estoque."
    ).parse_args(argv)
    estoque = Estoque()
    try:
        while True:
            try:
                opcao = int(_ler(MENU).strip())
            except ValueError:
                opcao = -1
            if opcao == 0:
                return 0
            try:
                _executar(opcao, estoque)
            except ValueError:
                sys.stdout.write("\nEntrada inválida!\n")
            _ler("\nPressione ENTER para continuar...")
    except EOFError:
        return 0