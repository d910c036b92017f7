# estruturas

Estruturas de dados e algoritmos de estudo. Cada módulo traz uma API em
Python e um pequeno programa de menu para o terminal, que lê as opções da
entrada padrão e termina quando a entrada acaba.

## Instalação

```
pip install .
```

Para rodar os testes:

```
pip install ".[test]"
pytest
```

## Programas de terminal

| Comando                 | O que faz                                                              |
|-------------------------|------------------------------------------------------------------------|
| `estruturas-agenda`     | Agenda de compromissos (título, assunto e data)                        |
| `estruturas-bst`        | Árvore binária de busca: inserir, remover, altura e os três percursos  |
| `estruturas-estoque`    | Estoque: cadastrar, consultar, relatório, volume baixo e remover       |
| `estruturas-fila`       | Fila de capacidade fixa, pedida ao iniciar                             |
| `estruturas-compras`    | Lista de compras                                                       |
| `estruturas-telefones`  | Lê um contato (nome, e-mail, telefone) e o mostra                      |
| `estruturas-pilha`      | Pilha de processos: empilhar, consultar, relatório e desempilhar       |
| `estruturas-algoritmos` | Demonstrações de complexidade, de O(1) a O(n!), com cronometragem      |

Na agenda e na lista de compras, uma opção inválida encerra o programa; nos
demais menus ela só mostra um aviso. Textos longos são cortados no tamanho
de cada campo (por exemplo, 19 caracteres no título de um compromisso).

`estruturas-algoritmos` recebe como argumentos as demonstrações a executar,
na ordem dada; sem argumentos não executa nenhuma:

```
estruturas-algoritmos o1 logn n nlogn n2 2n nfat
```

| Argumento | Demonstração                                                   |
|-----------|----------------------------------------------------------------|
| `o1`      | acesso direto a um elemento                                    |
| `logn`    | busca binária em intervalos de 1 milhão a 10 bilhões de itens  |
| `n`       | percorre e imprime 50 000 e 125 000 números                    |
| `nlogn`   | merge sort de 100 000 e 3 000 números aleatórios               |
| `n2`      | selection sort de 1 000, 3 000 e 10 000 números aleatórios     |
| `2n`      | Fibonacci recursivo de 30 e 40                                 |
| `nfat`    | todas as permutações de 1..5 e de 1..8                         |

Os tempos são de processador, medidos com `time.process_time`. As
demonstrações maiores (`2n`, `n2`) levam bastante tempo.

## Uso como biblioteca

### Árvore binária de busca (`estruturas.bst`)

```python
from estruturas.bst import BinarySearchTree

arvore = BinarySearchTree()
for valor in (50, 30, 70, 20, 40):
    arvore.insert(valor)

list(arvore.inorder())    # [20, 30, 40, 50, 70]
40 in arvore              # True
arvore.height(30)         # 1
arvore.remove(30)
list(arvore.preorder())   # [50, 40, 20, 70]
```

Valores repetidos são ignorados na inserção; a remoção de um nó com dois
filhos usa o menor valor da subárvore à direita. `find` devolve o `Node` ou
`None`, `height` levanta `KeyError` se o valor não está na árvore, e
`subtree_height(node)` dá a altura de qualquer nó (-1 para `None`).

### Algoritmos (`estruturas.algoritmos`)

```python
from estruturas.algoritmos import (
    binary_search, cronometrar, fibonacci, merge_sort, permutacoes, selection_sort,
)

binary_search([1, 3, 5, 7], 5)       # 2  (None se não achar)
merge_sort([3, 1, 2])                # [1, 2, 3], lista nova
selection_sort([3, 1, 2])            # [1, 2, 3], lista nova
fibonacci(10)                        # 55
list(permutacoes([1, 2, 3]))         # tuplas com as 6 permutações
resultado, segundos = cronometrar(fibonacci, 20)
```

Há também `acesso_direto(valores, indice)` e `percorrer(array)`, que devolve
os elementos como texto, cada um seguido de um espaço.

### Demais estruturas

- `estruturas.agenda`: `Compromisso`, `Agenda` (`adicionar`) e `formatar_agenda`,
  que gera o texto colorido com códigos ANSI.
- `estruturas.estoque`: `Produto`, `Estoque` (`cadastrar`, `consultar`,
  `remover`, `abaixo_do_volume`) e `relatorio`. `consultar` e `remover`
  levantam `KeyError` para um código inexistente.
- `estruturas.fila`: `Fila(capacidade)` com `enqueue`, que levanta
  `OverflowError` quando cheia, e `dequeue`, que levanta `IndexError` quando
  vazia; `formatar_fila` mostra os valores com duas casas.
- `estruturas.compras`: `Item`, `ListaCompras` (`adicionar`) e `formatar_lista`.
- `estruturas.telefones`: `Contato` e `formatar_contatos`.
- `estruturas.pilha`: `Processo`, `PilhaProcessos` (`push`, `pop`,
  `consultar`) e `relatorio`. `pop` levanta `IndexError` com a pilha vazia,
  `consultar` levanta `KeyError` se o número não existe.

A agenda, o estoque e a lista de compras guardam o item mais recente
primeiro; a pilha é percorrida do topo para a base.

## O que o pacote não faz

Nada é salvo em disco: os dados de cada programa existem só enquanto ele
roda. A lista telefônica não tem menu, só cadastra e mostra um contato.