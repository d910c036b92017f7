import io

import pytest

from estruturas.estoque import Estoque, Produto, main, relatorio


def _entrada(monkeypatch, texto):
    monkeypatch.setattr("sys.stdin", io.StringIO(texto))


def _estoque(*produtos):
    estoque = Estoque()
    for produto in produtos:
        estoque.cadastrar(produto)
    return estoque


def test_cadastrar_mais_recente_primeiro():
    a = Produto(1, "arroz", 10, 5.0)
    b = Produto(2, "feijao", 3, 7.5)
    estoque = _estoque(a, b)
    assert list(estoque) == [b, a]
    assert len(estoque) == 2


def test_consultar():
    a = Produto(1, "arroz", 10, 5.0)
    estoque = _estoque(a)
    assert estoque.consultar(1) is a
    with pytest.raises(KeyError):
        estoque.consultar(2)


def test_consultar_codigo_repetido_devolve_mais_recente():
    antigo = Produto(7, "antigo", 1, 1.0)
    novo = Produto(7, "novo", 2, 2.0)
    estoque = _estoque(antigo, novo)
    assert estoque.consultar(7) is novo


def test_remover():
    a = Produto(1, "arroz", 10, 5.0)
    b = Produto(2, "feijao", 3, 7.5)
    estoque = _estoque(a, b)
    assert estoque.remover(1) is a
    assert list(estoque) == [b]
    with pytest.raises(KeyError):
        estoque.remover(1)


def test_abaixo_do_volume_ordem_inversa():
    a = Produto(1, "a", 1, 1.0)
    b = Produto(2, "b", 2, 1.0)
    c = Produto(3, "c", 10, 1.0)
    estoque = _estoque(a, b, c)
    assert estoque.abaixo_do_volume(5) == [a, b]
    assert estoque.abaixo_do_volume(0) == []
    assert list(estoque) == [c, b, a]


def test_relatorio_vazio():
    assert relatorio([]) == "Lista vazia!\n"


def test_relatorio_produtos():
    texto = relatorio([Produto(12, "leite", 4, 2.5), Produto(13, "pao", 9, 1.0)])
    assert "Relatório de produtos" in texto
    assert "Produto[1]" in texto and "Produto[2]" in texto
    assert "Descrição do produto: leite" in texto
    assert "R$ 2.50" in texto
    assert texto.index("leite") < texto.index("pao")


def test_main_cadastra_consulta_remove(monkeypatch, capsys):
    _entrada(
        monkeypatch,
        "1\n5\nCafe\n3\n9.9\n\n2\n5\n\n5\n5\n\n3\n\n0\n",
    )
    assert main([]) == 0
    saida = capsys.readouterr().out
    assert "Descrição do produto: Cafe" in saida
    assert "Produto removido!" in saida
    assert "Lista vazia!" in saida


def test_main_mensagens_de_erro(monkeypatch, capsys):
    _entrada(monkeypatch, "2\n8\n\n4\n1\n\n9\n\n0\n")
    assert main([]) == 0
    saida = capsys.readouterr().out
    assert "Produto não cadastrado!" in saida
    assert "Nenhum produto com volume abaixo foi encontrado!" in saida
    assert "Opção inválida!" in saida