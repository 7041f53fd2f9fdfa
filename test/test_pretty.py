from cyk import PrettyPrinter, pp, parse, ambiguous_grammar, number_grammar
from cyk import SymbolTable, Span, Leaf, Unary, Binary


def test_pp():
    g = ambiguous_grammar()
    root = parse(g, 'aa')
    lines = [x.rstrip() for x in pp(root, g.symbols, color=False).split('\n')]
    print('\n'.join(lines))
    assert len(lines) == 5
    assert lines[0] == 'S [0,2)'
    assert lines[1].endswith('S [0,1)')
    assert lines[2].endswith("'a'")
    assert lines[3].endswith('S [1,2)')
    assert lines[4].endswith("'a'")
    assert '\x1b[' not in '\n'.join(lines)


def test_color():
    g = number_grammar()
    root = parse(g, '3.5')
    out = PrettyPrinter(g.symbols)(root)
    assert '\x1b[' in out
    assert 'Number' in out and 'Fraction' in out
    plain = PrettyPrinter(g.symbols, color=False)(root)
    assert plain.count("'") == 2 * 3          # three quoted leaves


def test_deep_tree():
    s = SymbolTable(['S', 'a'])
    S, a = s.get('S'), s.get('a')
    n = 3000
    t = Unary(S, Leaf(a, Span(0, 1)))
    for i in range(1, n):
        t = Binary(S, t, Unary(S, Leaf(a, Span(i, 1))))

    tree = PrettyPrinter(s, color=False).tree(t)
    count = 0
    stack = [tree]
    while stack:
        x = stack.pop()
        count += 1
        stack.extend(x.children)
    assert count == t.size()
