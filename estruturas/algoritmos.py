"""Algoritmos de diferentes ordens de complexidade, com medição de tempo."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Iterator, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

VALORES = (5, 15, 25, 35, 45, 78, 97, 12, 74)
_RAND_MAX = 2**31 - 1


def acesso_direto(valores: Sequence[T], indice: int) -> T:
    """Elemento na posição dada, em tempo constante."""
    return valores[indice]


def binary_search(arr: Sequence[Any], alvo: Any) -> int | None:
    """Posição do alvo na sequência ordenada, ou None se não estiver nela."""
    inicio, fim = 0, len(arr) - 1
    while inicio <= fim:
        meio = (inicio + fim) // 2
        if arr[meio] == alvo:
            return meio
        if arr[meio] < alvo:
            inicio = meio + 1
        else:
            fim = meio - 1
    return None


def percorrer(array: Sequence[Any]) -> str:
    """Os elementos, cada um seguido de um espaço."""
    return "".join(f"{valor} " for valor in array)


def _merge(esq: list[T], dir_: list[T]) -> list[T]:
    resultado: list[T] = []
    i = j = 0
    while i < len(esq) and j < len(dir_):
        if esq[i] <= dir_[j]:  # type: ignore[operator]
            resultado.append(esq[i])
            i += 1
        else:
            resultado.append(dir_[j])
            j += 1
    resultado.extend(esq[i:])
    resultado.extend(dir_[j:])
    return resultado


def merge_sort(arr: Sequence[T]) -> list[T]:
    """Nova lista ordenada por intercalação, estável."""
    itens = list(arr)
    if len(itens) <= 1:
        return itens
    meio = (len(itens) - 1) // 2 + 1
    return _merge(merge_sort(itens[:meio]), merge_sort(itens[meio:]))


def selection_sort(arr: Sequence[T]) -> list[T]:
    """Nova lista ordenada por seleção."""
    itens = list(arr)
    for i in range(len(itens) - 1):
        menor = min(range(i, len(itens)), key=itens.__getitem__)
        itens[i], itens[menor] = itens[menor], itens[i]
    return itens


def fibonacci(n: int) -> int:
    """n-ésimo número de Fibonacci pela recursão direta; n <= 1 devolve n."""
    return n if n <= 1 else fibonacci(n - 1) + fibonacci(n - 2)


def permutacoes(arr: Sequence[T]) -> Iterator[tuple[T, ...]]:
    """Todas as permutações, geradas por trocas sucessivas."""
    itens = list(arr)

    def gerar(inicio: int) -> Iterator[tuple[T, ...]]:
        if inicio == len(itens):
            yield tuple(itens)
            return
        for i in range(inicio, len(itens)):
            itens[inicio], itens[i] = itens[i], itens[inicio]
            yield from gerar(inicio + 1)
            itens[inicio], itens[i] = itens[i], itens[inicio]

    return gerar(0)


def cronometrar(func: Callable[..., T], *args: Any) -> tuple[T, float]:
    """Resultado da chamada e o tempo de processador gasto, em segundos."""
    inicio = time.process_time()
    resultado = func(*args)
    return resultado, time.process_time() - inicio


def _aleatorios(n: int) -> list[int]:
    return [random.randint(0, _RAND_MAX) for _ in range(n)]


def _demo_constante(out) -> None:
    valor, tempo = cronometrar(acesso_direto, VALORES, 5)
    out.write(f"O(1) -> Elemento acessado: {valor}\n")
    out.write(f"Tempo de execucao O(1): {tempo:f} segundos\n")


def _demo_log(out) -> None:
    for n, alvo in ((10_000_000, 4), (1_000_000, 2), (10_000_000_000, 7)):
        posicao, tempo = cronometrar(binary_search, range(1, n + 1), alvo)
        out.write(f"Tempo de execucao O(log n): {tempo:f} segundos\n")
        if posicao is None:
            out.write(f"Elemento {alvo} nao foi encontrado no array\n\n")
        else:
            out.write(f"Elemento {alvo} encontrado na posicao: {posicao}\n\n")


def _demo_linear(out) -> None:
    for n in (50_000, 125_000):
        texto, tempo = cronometrar(percorrer, range(1, n + 1))
        out.write(texto)
        out.write(f"\nTempo O(n): {tempo:f} segundos\n")


def _demo_n_log_n(out) -> None:
    for n in (100_000, 3_000):
        ordenado, tempo = cronometrar(merge_sort, _aleatorios(n))
        out.write("\n\nArray Ordenado:  " + percorrer(ordenado))
        out.write(f"\n\nTempo de execucao O(n Log n): {tempo:f} segundos\n")


def _demo_quadratico(out) -> None:
    for n in (1_000, 3_000, 10_000):
        out.write(f"Testanto com n={n}\n")
        _, tempo = cronometrar(selection_sort, _aleatorios(n))
        out.write(f"Tempo O(n^2): {tempo:f} segundos\n")


def _demo_exponencial(out) -> None:
    for n in (30, 40):
        resultado, tempo = cronometrar(fibonacci, n)
        out.write(f"\nResultado: {resultado}\n")
        out.write(f"Tempo de execucao O(2^n): {tempo:f} segundos\n")


def _demo_fatorial(out) -> None:
    for arr in (range(1, 6), range(1, 9)):
        inicio = time.process_time()
        for permutacao in permutacoes(arr):
            out.write(percorrer(permutacao) + "\n")
        tempo = time.process_time() - inicio
        out.write(f"\nTempo de execucao O(n!): {tempo:f} segundos\n")


_DEMOS = {
    "o1": ("O(1)", _demo_constante),
    "logn": ("O(Log n)", _demo_log),
    "n": ("O(n)", _demo_linear),
    "nlogn": ("O(n log n)", _demo_n_log_n),
    "n2": ("O(n^2)", _demo_quadratico),
    "2n": ("O(2^n)", _demo_exponencial),
    "nfat": ("O(n!)", _demo_fatorial),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Executa as demonstrações de complexidade pedidas."""
    parser = argparse.ArgumentParser(
        prog="algoritmos", description="Demonstrações de complexidade."
    )
    parser.add_argument("demos", nargs="*", choices=list(_DEMOS))
    args = parser.parse_args(argv)
    for nome in args.demos:
        rotulo, demo = _DEMOS[nome]
        sys.stdout.write(f"\nExecutando {rotulo}:\n\n")
        demo(sys.stdout)
    return 0