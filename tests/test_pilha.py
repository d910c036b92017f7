import io

import pytest

from estruturas.pilha import PilhaProcessos, Processo, main, relatorio


def _pilha(*processos):
    pilha = PilhaProcessos()
    for processo in processos:
        pilha.push(processo)
    return pilha


def test_pop_devolve_o_ultimo_empilhado():
    a, b = Processo(1, "a"), Processo(2, "b")
    pilha = _pilha(a, b)
    assert pilha.pop() == b
    assert pilha.pop() == a
    assert len(pilha) == 0


def test_pop_em_pilha_vazia():
    with pytest.raises(IndexError):
        PilhaProcessos().pop()


def test_iteracao_do_topo_para_a_base():
    a, b, c = Processo(1, "a"), Processo(2, "b"), Processo(3, "c")
    assert list(_pilha(a, b, c)) == [c, b, a]


def test_consultar_encontra_o_mais_proximo_do_topo():
    antigo, novo = Processo(5, "antigo"), Processo(5, "novo")
    assert _pilha(antigo, novo).consultar(5) == novo


def test_consultar_inexistente():
    with pytest.raises(KeyError):
        _pilha(Processo(1, "a")).consultar(9)


def test_relatorio_numera_os_processos():
    texto = relatorio(_pilha(Processo(1, "a"), Processo(2, "b")))
    assert "--Relatorio de Processos--" in texto
    assert "--Processos [1]--" in texto and "--Processos [2]--" in texto
    assert "Numero do processo: 2\nDescricao do processo: b\n" in texto
    assert texto.index("processo: 2") < texto.index("processo: 1")


def test_relatorio_vazio_tem_so_o_cabecalho():
    texto = relatorio([])
    assert "--Relatorio de Processos--" in texto
    assert "Processos [" not in texto


def _rodar(monkeypatch, capsys, entrada):
    monkeypatch.setattr("sys.stdin", io.StringIO(entrada))
    codigo = main([])
    return codigo, capsys.readouterr().out


def test_main_empilha_consulta_e_desempilha(monkeypatch, capsys):
    entrada = "1\n7\nbackup\n\n2\n7\n\n4\n\n4\n\n0\n"
    codigo, saida = _rodar(monkeypatch, capsys, entrada)
    assert codigo == 0
    assert saida.count("Descricao do processo: backup") == 2
    assert "Processo desempilhado!" in saida
    assert "Pilha vazia!" in saida


def test_main_consulta_inexistente(monkeypatch, capsys):
    _, saida = _rodar(monkeypatch, capsys, "2\n3\n\n0\n")
    assert "\nProcesso desempilhado!" in saida
    assert "Numero do processo: 3" not in saida


def test_main_opcao_invalida(monkeypatch, capsys):
    codigo, saida = _rodar(monkeypatch, capsys, "8\n\n0\n")
    assert codigo == 0
    assert "Opção inválida!" in saida