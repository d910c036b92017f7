"""Fila circular de números com capacidade fixa."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence

MENU = "\n1 - Inserir elemento\n2 - Remover elemento\n3 - Mostrar Fila\n0 - Sair"


class Fila:
    """Fila FIFO com no máximo ``capacidade`` elementos."""

    def __init__(self, capacidade: int) -> None:
        if capacidade < 0:
            raise ValueError("capacidade negativa")
        self.capacidade = capacidade
        self._itens: deque[float] = deque()

    def enqueue(self, value: float) -> None:
        """Insere no fim; OverflowError se a fila estiver cheia."""
        if len(self._itens) >= self.capacidade:
            raise OverflowError("fila cheia")
        self._itens.append(float(value))

    def dequeue(self) -> float:
        """Remove e devolve o primeiro; IndexError se a fila estiver vazia."""
        if not self._itens:
            raise IndexError("fila vazia")
        return self._itens.popleft()

    def __iter__(self) -> Iterator[float]:
        return iter(self._itens)

    def __len__(self) -> int:
        return len(self._itens)


def formatar_fila(fila: Fila) -> str:
    """Valores com duas casas, separados por tabulação."""
    return "".join(f"{valor:.2f}\t" for valor in fila) + "\n\n"


def _ler(prompt: str) -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    linha = sys.stdin.readline()
    if linha == "":
        raise EOFError
    return linha.strip()


def main(argv: Sequence[str] | None = None) -> int:
    """Menu interativo da fila."""
    argparse.ArgumentParser(prog="fila", description="Fila circular.").parse_args(
        argv
    )
    try:
        try:
            fila = Fila(int(_ler("\nQual a capacidade da fila? ")))
        except ValueError:
            sys.stdout.write("\nCapacidade invalida\n")
            return 1
        while True:
            try:
                opcao = int(_ler(MENU))
            except ValueError:
                opcao = -1
            if opcao == 0:
                return 0
            if opcao == 1:
                try:
                    fila.enqueue(float(_ler("\nValor do elemento a ser inserido? ")))
                except ValueError:
                    sys.stdout.write("\nValor invalido\n\n")
                except OverflowError:
                    sys.stdout.write("\nFila cheia\n\n")
            elif opcao == 2:
                try:
                    fila.dequeue()
                except IndexError:
                    sys.stdout.write("\nFila vazia\n\n")
                else:
                    sys.stdout.write("\nRemovido com sucesso\n\n")
            elif opcao == 3:
                sys.stdout.write("\nConteudo da fila => " + formatar_fila(fila))
            else:
                sys.stdout.write("\nOpcao Invalida\n\n")
    except EOFError:
        return 0