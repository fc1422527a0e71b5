from __future__ import annotations


class Symbol:
    """An interned identifier.

    Symbols are only created through a SymbolTable, which hands out one object
    per canonical (uppercased) name. Equality is therefore identity.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = name

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class SymbolTable:
    """Canonicalizes case-insensitive names to unique Symbols.

    There is no removal: once a name has been seen its Symbol is returned for
    the life of the table.
    """

    __slots__ = ("_symbols",)

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}

    def intern(self, text: str) -> Symbol:
        name = text.upper()
        sym = self._symbols.get(name)
        if sym is None:
            sym = Symbol(name)
            self._symbols[name] = sym
        return sym

    def __contains__(self, text: str) -> bool:
        return text.upper() in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)
