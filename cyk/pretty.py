"""
Pretty printer for parse trees
"""

from io import StringIO
from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from cyk.chart import Leaf


class PrettyPrinter:
    "Renders a parse tree as an indented outline, with ANSI colors unless `color=False`."

    def __init__(self, symbols, color=True, width=10_000):
        self.symbols = symbols
        self.color = color
        self.width = width

    def label(self, x):
        s = self.symbols.resolve(x.kind)
        if isinstance(x, Leaf):
            return Text(repr(s), style='magenta')
        return Text.assemble((s, 'bold blue'), f' {x.span!r}')

    def tree(self, x):
        root = Tree(self.label(x))
        stack = [(x, root)]
        while stack:
            y, t = stack.pop()
            for z in y.children:
                stack.append((z, t.add(self.label(z))))
        return root

    def __call__(self, x):
        console = Console(
            file = StringIO(),
            width = self.width,
            force_terminal = self.color,
            color_system = 'standard' if self.color else None,
            highlight = False,
        )
        console.print(self.tree(x))
        return console.file.getvalue().rstrip('\n')

    def print(self, x):
        print(self(x))


def pp(x, symbols, **kwargs):
    return PrettyPrinter(symbols, **kwargs)(x)
