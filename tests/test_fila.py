import io

import pytest

from estruturas.fila import Fila, formatar_fila, main


def _entrada(monkeypatch, texto):
    monkeypatch.setattr("sys.stdin", io.StringIO(texto))


def test_fifo():
    fila = Fila(5)
    for valor in (1, 2, 3):
        fila.enqueue(valor)
    assert fila.dequeue() == 1.0
    assert list(fila) == [2.0, 3.0]
    assert len(fila) == 2


def test_fila_cheia():
    fila = Fila(2)
    fila.enqueue(1)
    fila.enqueue(2)
    with pytest.raises(OverflowError):
        fila.enqueue(3)
    assert list(fila) == [1.0, 2.0]


def test_fila_vazia():
    with pytest.raises(IndexError):
        Fila(3).dequeue()


def test_capacidade_negativa():
    with pytest.raises(ValueError):
        Fila(-1)


def test_reuso_circular():
    fila = Fila(3)
    for valor in (1, 2, 3):
        fila.enqueue(valor)
    fila.dequeue()
    fila.dequeue()
    fila.enqueue(4)
    fila.enqueue(5)
    assert list(fila) == [3.0, 4.0, 5.0]


def test_formatar():
    fila = Fila(3)
    fila.enqueue(1)
    fila.enqueue(2.5)
    assert formatar_fila(fila) == "1.00\t2.50\t\n\n"
    assert formatar_fila(Fila(1)) == "\n\n"


def test_main_fluxo(monkeypatch, capsys):
    _entrada(monkeypatch, "2\n1\n7\n1\n8\n1\n9\n2\n3\n2\n2\n9\n0\n")
    assert main([]) == 0
    saida = capsys.readouterr().out
    assert "Fila cheia" in saida
    assert "Conteudo da fila => 8.00\t\n\n" in saida
    assert "Removido com sucesso" in saida
    assert "Fila vazia" in saida
    assert "Opcao Invalida" in saida


def test_main_capacidade_invalida(monkeypatch, capsys):
    _entrada(monkeypatch, "abc\n")
    assert main([]) == 1
    assert "Capacidade invalida" in capsys.readouterr().out