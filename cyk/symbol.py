"""
Symbol interning.

A `Symbol` is a small integer handle for a terminal or non-terminal name.
Handles are allocated in first-seen order and are only meaningful relative to
the `SymbolTable` that produced them.
"""

from threading import Lock


Symbol = int


class SymbolTable:
    "Bidirectional string <-> handle map; grows, never shrinks."

    def __init__(self, init=()):
        self._lock = Lock()
        self._handles = {}
        self._strings = []
        for x in init:
            self.intern(x)

    def intern(self, string: str) -> Symbol:
        if not isinstance(string, str):
            raise TypeError(f'symbol names are strings, got {type(string).__name__}: {string!r}')
        h = self._handles.get(string)
        if h is not None: return h
        with self._lock:
            # another writer may have beaten us to it
            h = self._handles.get(string)
            if h is None:
                h = len(self._strings)
                self._strings.append(string)
                self._handles[string] = h
            return h

    def resolve(self, symbol: Symbol) -> str:
        if not (0 <= symbol < len(self._strings)):
            raise KeyError(f'unknown symbol handle {symbol!r}')
        return self._strings[symbol]

    def exists(self, string: str) -> bool:
        return string in self._handles

    def get(self, string, default=None):
        "Lookup without interning."
        return self._handles.get(string, default)

    def __contains__(self, string):
        return self.exists(string)

    def __getitem__(self, symbol):
        return self.resolve(symbol)

    def __len__(self):
        return len(self._strings)

    def __iter__(self):
        return iter(self._strings)

    def __repr__(self):
        return f'SymbolTable({self._strings!r})'
