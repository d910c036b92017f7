"""Lista telefônica com cadastro de um contato."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

NOME_MAX = 49
EMAIL_MAX = 49


@dataclass(frozen=True)
class Contato:
    """Contato com nome, e-mail e telefone."""

    nome: str
    email: str
    telefone: int


def formatar_contatos(contatos: Iterable[Contato]) -> str:
    """Texto com nome, e-mail e telefone de cada contato."""
    return "".join(
        f"\nNome: {c.nome}\nE-mail: {c.email}\nTelefone: {c.telefone}"
        for c in contatos
    )


def _ler(prompt: str) -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    linha = sys.stdin.readline()
    if linha == "":
        raise EOFError
    return linha.rstrip("\r\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Lê um contato e mostra a lista telefônica."""
    argparse.ArgumentParser(
        prog="telefones", description="Lista telefônica."
    ).parse_args(argv)
    try:
        nome = _ler("\nDigite o nome a ser inserido:")[:NOME_MAX]
        palavras = _ler("\nDigite o email a ser inserido:").split()
        email = palavras[0][:EMAIL_MAX] if palavras else ""
        telefone = int(_ler("\nDigite o telefone a ser inserido:").strip())
    except EOFError:
        return 1
    except ValueError:
        sys.stdout.write("\nTelefone inválido!\n")
        return 1
    contatos = [Contato(nome, email, telefone)]
    sys.stdout.write(formatar_contatos(contatos))
    return 0