# shiftkit

shiftkit gives you a compact way to describe a context-free grammar, as groundwork for bottom-up (LR-family) parser generators. Every terminal and every non-terminal gets a stable integer identifier. Production rules refer to symbols by that identifier.

## Installation

```
pip install shiftkit
```

## Usage

```python
from shiftkit.grammar import Grammar, SymbolKind

grammar = Grammar()
expr = grammar.add_symbol(SymbolKind.NON_TERMINAL, "Expr")
plus = grammar.add_symbol(SymbolKind.TERMINAL, "+")
num = grammar.add_symbol(SymbolKind.TERMINAL, "num")

grammar.add_rule(expr, [expr, plus, expr])
grammar.add_rule(expr, [num])
grammar.set_start(expr)

grammar.symbol_name(plus)   # "+"
grammar.symbol_kind(expr)   # SymbolKind.NON_TERMINAL
grammar.rules[expr]         # [[0, 1, 0], [2]]
grammar.start               # 0
```

### Symbols

`SymbolKind` has two members: `SymbolKind.TERMINAL` and `SymbolKind.NON_TERMINAL`.

- `add_symbol(kind, name)` returns the identifier of the symbol.
  - A symbol is identified by its kind and its name together.
  - Adding the same kind and name again returns the existing identifier.
  - Identifiers are assigned in order, starting from 0.
- `symbol_name(symbol_id)` returns the symbol's name, or `None` for an unknown identifier.
- `symbol_kind(symbol_id)` returns the symbol's kind, or `None` for an unknown identifier.
- `symbols` is a list of `(kind, name)` pairs, indexed by identifier.

### Rules

- `add_rule(non_terminal, production)` appends a production to a non-terminal.
  - `production` is any iterable of symbol identifiers. It is stored as a list.
  - Raises `ValueError` if `non_terminal` is not a known non-terminal.
- `rules[symbol_id]` holds each symbol's productions in the order they were added. Terminals always have an empty list.
- `set_start(non_terminal)` records the start symbol.
  - The start symbol is available as `start`, which is `None` until it is set.
  - The identifier you pass is stored as given, without a check.

## What the package does not do

shiftkit only describes grammars. It does not:

- compute item sets or FIRST/FOLLOW sets,
- build LR(0), LR(1), SLR(1) or LALR(1) parse tables,
- tokenise or parse any input,
- provide a command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```