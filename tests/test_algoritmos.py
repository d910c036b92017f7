import itertools
import math
import random

import pytest

from estruturas.algoritmos import (
    VALORES,
    acesso_direto,
    binary_search,
    cronometrar,
    fibonacci,
    main,
    merge_sort,
    percorrer,
    permutacoes,
    selection_sort,
)


def test_acesso_direto_no_array_da_prova():
    assert acesso_direto(VALORES, 5) == 78


def test_acesso_direto_fora_do_array():
    with pytest.raises(IndexError):
        acesso_direto(VALORES, len(VALORES))


def test_binary_search_encontra_cada_elemento():
    arr = sorted(random.Random(1).sample(range(1000), 200))
    for posicao, valor in enumerate(arr):
        assert binary_search(arr, valor) == posicao


def test_binary_search_ausente():
    assert binary_search([1, 3, 5], 4) is None
    assert binary_search([], 1) is None


def test_binary_search_em_range_enorme():
    n = 10_000_000_000
    assert binary_search(range(1, n + 1), n) == n - 1


def test_percorrer_separa_com_espaco():
    assert percorrer([1, 2, 3]) == "1 2 3 "
    assert percorrer([]) == ""


@pytest.mark.parametrize("ordenar", [merge_sort, selection_sort])
def test_ordenacoes_concordam_com_sorted(ordenar):
    gerador = random.Random(7)
    for tamanho in (0, 1, 2, 17, 300):
        dados = [gerador.randint(-50, 50) for _ in range(tamanho)]
        original = list(dados)
        assert ordenar(dados) == sorted(dados)
        assert dados == original


def test_merge_sort_e_estavel():
    pares = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]
    chaves = [_Chave(k, r) for k, r in pares]
    resultado = [c.rotulo for c in merge_sort(chaves)]
    assert resultado == ["b", "d", "a", "c"]


class _Chave:
    def __init__(self, valor, rotulo):
        self.valor = valor
        self.rotulo = rotulo

    def __le__(self, outro):
        return self.valor <= outro.valor


def test_fibonacci_casos_base():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


def test_fibonacci_recorrencia():
    for n in range(2, 20):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_permutacoes_completas_e_distintas():
    arr = [1, 2, 3, 4, 5]
    todas = list(permutacoes(arr))
    assert len(todas) == math.factorial(len(arr))
    assert set(todas) == set(itertools.permutations(arr))
    assert todas[0] == tuple(arr)
    assert arr == [1, 2, 3, 4, 5]


def test_permutacoes_na_ordem_das_trocas():
    assert list(permutacoes([1, 2, 3])) == [
        (1, 2, 3), (1, 3, 2), (2, 1, 3), (2, 3, 1), (3, 2, 1), (3, 1, 2),
    ]


def test_cronometrar_devolve_resultado_e_tempo():
    resultado, tempo = cronometrar(sorted, [3, 1, 2])
    assert resultado == [1, 2, 3]
    assert tempo >= 0.0


def test_main_sem_demonstracoes(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_acesso_direto(capsys):
    assert main(["o1"]) == 0
    saida = capsys.readouterr().out
    assert "O(1) -> Elemento acessado: 78\n" in saida
    assert "Tempo de execucao O(1): " in saida


def test_main_demo_invalida():
    with pytest.raises(SystemExit):
        main(["nada"])