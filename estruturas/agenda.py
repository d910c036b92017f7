"""Agenda de compromissos; o compromisso mais recente aparece primeiro."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

RESETAR = "\x1b[0m"
VERMELHO = "\x1b[31m"
VERDE = "\x1b[32m"
AMARELO = "\x1b[33m"
AZUL = "\x1b[34m"
MAGENTA = "\x1b[35m"
CIANO = "\x1b[36m"

TITULO_MAX = 19
ASSUNTO_MAX = 34
DATA_MAX = 10

MENU = (
    f"{MAGENTA}--- MENU ---\n\n{RESETAR}"
    f"{VERDE}1. Adicionar compromisso\n{RESETAR}"
    f"{AMARELO}2. Exibir os compromissos\n{RESETAR}"
    f"{VERMELHO}3. Encerrar o programa\n\n{RESETAR}"
    f"{MAGENTA}Escolha uma opção: {RESETAR}"
)


@dataclass(frozen=True)
class Compromisso:
    """Um compromisso com título, assunto e data."""

    titulo: str
    assunto: str
    data: str


class Agenda:
    """Coleção de compromissos, do mais recente ao mais antigo."""

    def __init__(self) -> None:
        self._itens: deque[Compromisso] = deque()

    def adicionar(self, compromisso: Compromisso) -> None:
        """Coloca o compromisso no início da agenda."""
        self._itens.appendleft(compromisso)

    def __iter__(self) -> Iterator[Compromisso]:
        return iter(self._itens)

    def __len__(self) -> int:
        return len(self._itens)


def formatar_agenda(agenda: Agenda) -> str:
    """Texto colorido com todos os compromissos da agenda."""
    if len(agenda) == 0:
        return f"{VERMELHO}\nNão há nenhum compromisso na agenda.\n{RESETAR}"
    partes = [f"{AZUL}\n--- Lista de Compromissos ---\n{RESETAR}"]
    for compromisso in agenda:
        partes.append(f"{CIANO}\nTítulo: {compromisso.titulo}\n{RESETAR}")
        partes.append(f"{CIANO}Assunto: {compromisso.assunto}\n{RESETAR}")
        partes.append(f"{CIANO}Data: {compromisso.data}{RESETAR}")
    partes.append("\n")
    return "".join(partes)


def _ler(prompt: str) -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    linha = sys.stdin.readline()
    if linha == "":
        raise EOFError
    return linha.rstrip("\r\n")


def _ler_opcao(prompt: str) -> int | None:
    try:
        return int(_ler(prompt).strip())
    except ValueError:
        return None


def _ler_compromisso() -> Compromisso:
    titulo = _ler(f"{AMARELO}\nTítulo do compromisso: {RESETAR}")[:TITULO_MAX]
    assunto = _ler(f"{AMARELO}Assunto do compromisso: {RESETAR}")[:ASSUNTO_MAX]
    data = _ler(f"{AMARELO}Data do compromisso (dd/mm/aaaa): {RESETAR}")[:DATA_MAX]
    return Compromisso(titulo, assunto, data)


def main(argv: Sequence[str] | None = None) -> int:
    """Menu interativo da agenda de compromissos."""
    argparse.ArgumentParser(
        prog="agenda", description="Agenda de compromissos."
    ).parse_args(argv)
    agenda = Agenda()
    try:
        while True:
            opcao = _ler_opcao(MENU)
            if opcao == 1:
                agenda.adicionar(_ler_compromisso())
                sys.stdout.write(
                    f"{VERDE}\nO compromisso foi adicionado com sucesso!\n\n{RESETAR}"
                )
            elif opcao == 2:
                sys.stdout.write(formatar_agenda(agenda))
            elif opcao == 3:
                sys.stdout.write(f"{VERDE}\nPrograma encerrado!\n{RESETAR}")
                return 0
            else:
                sys.stdout.write(f"{VERMELHO}\nOpção inválida!\n{RESETAR}")
                return 0
    except EOFError:
        return 0