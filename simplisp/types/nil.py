from __future__ import annotations


class NilType:
    """The empty list, also the only false value."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Nil"
    def __str__(self): return "()"
    def __bool__(self): return False

    def __copy__(self): return self
    def __deepcopy__(self, memo): return self
    def __reduce__(self): return (NilType, ())


class TrueType:
    """The canonical true value, written T."""

    _instance: TrueType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "T"
    def __str__(self): return "T"

    def __copy__(self): return self
    def __deepcopy__(self, memo): return self
    def __reduce__(self): return (TrueType, ())


Nil = NilType()
T = TrueType()


def truth(flag: bool) -> NilType | TrueType:
    """Map a Python bool onto T / Nil."""
    return T if flag else Nil
