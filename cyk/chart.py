"""
Chart structures: spans, parse-tree nodes, cells and the span-indexed chart.
"""

from typing import NamedTuple

from cyk.symbol import Symbol


class Span(NamedTuple):
    """
    Half-open interval `[start, start + length)` over the input characters.

    Equality and hashing use both fields, but ordering compares `length`
    only; spans are never sorted by position.
    """
    start: int
    length: int

    @property
    def end(self):
        return self.start + self.length

    def split(self, k):
        "Left and right sub-spans when the left one has length `k`."
        assert 0 < k < self.length, k
        return Span(self.start, k), Span(self.start + k, self.length - k)

    def __lt__(self, other): return self.length < other.length
    def __le__(self, other): return self.length <= other.length
    def __gt__(self, other): return self.length > other.length
    def __ge__(self, other): return self.length >= other.length

    def __repr__(self):
        return f'[{self.start},{self.end})'


class Node:
    """
    Parse-tree node.  Arity is fixed by the subclass: `Leaf` (an input
    character), `Unary` (unit rule over a leaf) or `Binary` (binary rule over
    two adjacent nodes).
    """

    __slots__ = ('kind', 'span', '_hash')

    children = ()

    def __init__(self, kind: Symbol, span: Span):
        self.kind = kind
        self.span = span
        self._hash = hash((type(self), kind, span, self.children))

    def __hash__(self):
        return self._hash

    def __eq__(self, other):
        stack = [(self, other)]
        while stack:
            x, y = stack.pop()
            if x is y: continue
            if not (type(x) is type(y)
                    and x._hash == y._hash
                    and x.kind == y.kind
                    and x.span == y.span):
                return False
            stack.extend(zip(x.children, y.children))
        return True

    def __iter__(self):
        return iter(self.children)

    def nodes(self):
        "All nodes in prefix order."
        stack = [self]
        while stack:
            x = stack.pop()
            yield x
            stack.extend(reversed(x.children))

    def leaves(self):
        "Leaves from left to right."
        for x in self.nodes():
            if isinstance(x, Leaf):
                yield x

    def text(self, symbols):
        "The substring of the input covered by this node."
        return ''.join(symbols.resolve(x.kind) for x in self.leaves())

    def label(self, symbols):
        return symbols.resolve(self.kind)

    def height(self):
        h = 0
        stack = [(self, 0)]
        while stack:
            x, d = stack.pop()
            if d > h: h = d
            stack.extend((y, d + 1) for y in x.children)
        return h

    def size(self):
        return sum(1 for _ in self.nodes())

    def __repr__(self):
        return f'{type(self).__name__}({self.kind}, {self.span!r})'


class Leaf(Node):
    "A single input character; `kind` is its terminal symbol."

    __slots__ = ()

    def __init__(self, kind, span):
        assert span.length == 1, span
        super().__init__(kind, span)


class Unary(Node):

    __slots__ = ('child',)

    def __init__(self, kind, child: Leaf):
        assert isinstance(child, Leaf), child
        self.child = child
        super().__init__(kind, child.span)

    @property
    def children(self):
        return (self.child,)


class Binary(Node):

    __slots__ = ('left', 'right')

    def __init__(self, kind, left: Node, right: Node):
        assert left.span.end == right.span.start, [left.span, right.span]
        self.left = left
        self.right = right
        super().__init__(kind, Span(left.span.start, left.span.length + right.span.length))

    @property
    def children(self):
        return (self.left, self.right)


class Cell:
    "Alternative nodes derivable over one span."

    __slots__ = ('span', 'nodes')

    def __init__(self, span: Span, nodes=()):
        self.span = span
        self.nodes = []
        for x in nodes:
            self.add(x)

    def add(self, node):
        assert node.span == self.span, [node.span, self.span]
        self.nodes.append(node)

    def lookup(self, kind: Symbol):
        "First node of the given kind, or None."
        for x in self.nodes:
            if x.kind == kind:
                return x

    def kinds(self):
        return [x.kind for x in self.nodes]

    def is_empty(self):
        return not self.nodes

    def __contains__(self, kind):
        return self.lookup(kind) is not None

    def __iter__(self):
        return iter(self.nodes)

    def __len__(self):
        return len(self.nodes)

    def __repr__(self):
        return f'Cell({self.span!r}, {self.nodes!r})'


class Chart:
    """
    Span -> cell table for one parse.  Cells are committed in order of
    increasing span length and are read-only afterwards.
    """

    def __init__(self, n):
        self.n = n
        self.cells = {}
        self.diagnostics = []

    def commit(self, cell):
        assert cell.span not in self.cells, cell.span
        assert 0 <= cell.span.start and cell.span.end <= self.n, cell.span
        self.cells[cell.span] = cell

    def get(self, span):
        return self.cells.get(span)

    def cell(self, start, length):
        return self.cells.get(Span(start, length))

    def top(self):
        "Cell covering the whole input, or None when nothing derives it."
        if self.n == 0: return None
        return self.cells.get(Span(0, self.n))

    def accepts(self, kind):
        top = self.top()
        return top is not None and kind in top

    def __getitem__(self, span):
        return self.cells[span]

    def __contains__(self, span):
        return span in self.cells

    def __iter__(self):
        return iter(self.cells.items())

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        return f'<Chart n={self.n} cells={len(self)} diagnostics={len(self.diagnostics)}>'
