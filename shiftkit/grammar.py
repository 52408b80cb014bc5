"""Core data structures for representing a context-free grammar.

Each symbol (terminal or non-terminal) gets a unique integer ID and is stored
with its kind and name. Rules belong to non-terminals and are sequences of
symbol IDs, suitable for building bottom-up (LR, SLR, LALR) parsers.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

__all__ = ["SymbolKind", "Grammar"]


class SymbolKind(Enum):
    """Whether a grammar symbol is a terminal (token) or a non-terminal (rule)."""

    TERMINAL = "terminal"
    NON_TERMINAL = "non_terminal"


class Grammar:
    """A context-free grammar built from symbol IDs and production rules.

    ``symbols`` holds ``(kind, name)`` pairs indexed by symbol ID, and
    ``rules`` holds, for every symbol ID, the list of its productions.
    Terminals always have an empty production list.

    Example::

        grammar = Grammar()
        expr = grammar.add_symbol(SymbolKind.NON_TERMINAL, "Expr")
        plus = grammar.add_symbol(SymbolKind.TERMINAL, "+")
        num = grammar.add_symbol(SymbolKind.TERMINAL, "num")
        grammar.add_rule(expr, [expr, plus, expr])
        grammar.add_rule(expr, [num])
    """

    def __init__(self) -> None:
        self.symbols: list[tuple[SymbolKind, str]] = []
        self.rules: list[list[list[int]]] = []
        self.start: int | None = None
        self._symbol_map: dict[tuple[SymbolKind, str], int] = {}

    def __repr__(self) -> str:
        return (
            f"Grammar(symbols={self.symbols!r}, rules={self.rules!r}, "
            f"start={self.start!r})"
        )

    def add_symbol(self, kind: SymbolKind, name: str) -> int:
        """Add a symbol and return its ID; an existing kind/name pair keeps its ID."""
        key = (kind, str(name))
        existing = self._symbol_map.get(key)
        if existing is not None:
            return existing

        symbol_id = len(self.symbols)
        self.symbols.append(key)
        self.rules.append([])
        self._symbol_map[key] = symbol_id
        return symbol_id

    def add_rule(self, non_terminal: int, production: Iterable[int]) -> None:
        """Append a production to a non-terminal.

        Raises ValueError if ``non_terminal`` is not a known non-terminal symbol.
        """
        if self.symbol_kind(non_terminal) is not SymbolKind.NON_TERMINAL:
            raise ValueError(f"Symbol ID {non_terminal} is not a non-terminal")
        self.rules[non_terminal].append(list(production))

    def _entry(self, symbol_id: int) -> tuple[SymbolKind, str] | None:
        if 0 <= symbol_id < len(self.symbols):
            return self.symbols[symbol_id]
        return None

    def symbol_name(self, symbol_id: int) -> str | None:
        """Return the name of a symbol, or None if the ID is unknown."""
        entry = self._entry(symbol_id)
        return entry[1] if entry is not None else None

    def symbol_kind(self, symbol_id: int) -> SymbolKind | None:
        """Return the kind of a symbol, or None if the ID is unknown."""
        entry = self._entry(symbol_id)
        return entry[0] if entry is not None else None

    def set_start(self, non_terminal: int) -> None:
        """Mark the given symbol as the grammar's start symbol."""
        self.start = non_terminal