"""Estruturas de dados e algoritmos de estudo, com programas de menu para o terminal."""

__version__ = "0.1.0"