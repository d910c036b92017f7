"""Pilha de processos: o último empilhado é o primeiro a sair."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

DESCRICAO_MAX = 49

LINHA = "-" * 54


@dataclass(frozen=True)
class Processo:
    """Processo com número e descrição."""

    numero: int
    descricao: str


class PilhaProcessos:
    """Pilha de processos; a iteração vai do topo para a base."""

    def __init__(self) -> None:
        self._itens: list[Processo] = []

    def push(self, processo: Processo) -> None:
        """Empilha o processo."""
        self._itens.append(processo)

    def pop(self) -> Processo:
        """Desempilha e devolve o topo; IndexError se a pilha estiver vazia."""
        if not self._itens:
            raise IndexError("pilha vazia")
        return self._itens.pop()

    def consultar(self, numero: int) -> Processo:
        """Processo mais próximo do topo com o número dado; KeyError se não houver."""
        for processo in self:
            if processo.numero == numero:
                return processo
        raise KeyError(numero)

    def __iter__(self) -> Iterator[Processo]:
        return reversed(self._itens)

    def __len__(self) -> int:
        return len(self._itens)


def _cabecalho(titulo: str) -> str:
    return f"\n{LINHA}\n\t\t--{titulo}--\n{LINHA}\n"


def _detalhes(processo: Processo) -> str:
    return (
        f"Numero do processo: {processo.numero}"
        f"\nDescricao do processo: {processo.descricao}\n"
    )


def relatorio(processos: Iterable[Processo]) -> str:
    """Relatório numerado dos processos dados."""
    partes = [_cabecalho("Relatorio de Processos")]
    for numero, processo in enumerate(processos, 1):
        partes.append(_cabecalho(f"Processos [{numero}]"))
        partes.append(_detalhes(processo))
    return "".join(partes)


MENU = (
    _cabecalho("Controle de Processos")
    + "1- Empilhar Processos\n"
    "2- Consultar Processos\n"
    "3- Relatório de Processos\n"
    "4- Desempilhar Processos\n"
    "0- Sair\n"
    f"\n{LINHA}\n"
    "Digite a opção desejada:"
)


def _ler(prompt: str) -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    linha = sys.stdin.readline()
    if linha == "":
        raise EOFError
    return linha.rstrip("\r\n")


def _executar(opcao: int, pilha: PilhaProcessos) -> None:
    if opcao == 1:
        sys.stdout.write(_cabecalho("Empilhar Processos"))
        numero = int(_ler("Digite o numero do processo:").strip())
        descricao = _ler("Digite a descricao do processo:")[:DESCRICAO_MAX]
        sys.stdout.write("\n\n")
        pilha.push(Processo(numero, descricao))
    elif opcao == 2:
        sys.stdout.write(_cabecalho("Consultar Processos"))
        numero = int(_ler("Digite o numero do processo:").strip())
        try:
            sys.stdout.write(relatorio([pilha.consultar(numero)]))
        except KeyError:
            sys.stdout.write("\nProcesso desempilhado!")
    elif opcao == 3:
        sys.stdout.write(relatorio(pilha))
    elif opcao == 4:
        sys.stdout.write(_cabecalho("Desempilhar Processos"))
        try:
            processo = pilha.pop()
        except IndexError:
            sys.stdout.write("\nPilha vazia!\n")
        else:
            sys.stdout.write(_cabecalho("Processos"))
            sys.stdout.write(_detalhes(processo))
            sys.stdout.write("Processo desempilhado!")
    else:
        sys.stdout.write("\nOpção inválida!\n\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Menu interativo do controle de processos."""
    argparse.ArgumentParser(
        prog="pilha", description="Controle de processos."
    ).parse_args(argv)
    pilha = PilhaProcessos()
    try:
        while True:
            try:
                opcao = int(_ler(MENU).strip())
            except ValueError:
                opcao = -1
            if opcao == 0:
                return 0
            try:
                _executar(opcao, pilha)
            except ValueError:
                sys.stdout.write("\nEntrada inválida!\n")
            _ler("\nPressione ENTER para continuar...")
    except EOFError:
        return 0