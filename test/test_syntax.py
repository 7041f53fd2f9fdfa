import pytest

from cyk import Grammar, GrammarError, GrammarSyntaxError, SymbolTable, parse, syntax, number_grammar


BINARY = """
% binary numerals
start: Number
Number -> Integer Digit | "0" | "1"
Integer -> Integer Digit | "0" | "1"
Digit -> "0" | "1"
"""


def test_read():
    g = Grammar.from_string(BINARY)
    assert g.name(g.start) == 'Number'
    assert {g.name(x) for x in g.terminals} == {'0', '1'}
    assert {g.name(x) for x in g.nonterminals} == {'Number', 'Integer', 'Digit'}
    assert len(g) == 8
    assert parse(g, '101').text(g.symbols) == '101'


def test_default_start():
    g = syntax.read('S -> S S | "a"')
    assert g.name(g.start) == 'S'
    assert parse(g, 'aaa').text(g.symbols) == 'aaa'

    # `start` may come after the rules
    g = syntax.read('A -> "a"\nS -> A A\nstart: S')
    assert g.name(g.start) == 'S'


def test_declarations():
    g = syntax.read("""
    terminals: "x" "y"
    nonterminals: Unused
    S -> "x"
    """)
    assert g.is_terminal(g.symbols.get('y'))
    assert g.is_non_terminal(g.symbols.get('Unused'))
    assert len(g) == 1


def test_escapes():
    g = syntax.read(r'Q -> "\"" | "\\" | "%"')
    assert {g.name(x) for x in g.terminals} == {'"', '\\', '%'}
    for x in ['"', '\\', '%']:
        assert parse(g, x).text(g.symbols) == x


def test_symbols():
    symbols = SymbolTable()
    g = syntax.read(BINARY, symbols=symbols)
    assert g.symbols is symbols
    assert symbols.exists('Digit')


def test_str_round_trip():
    g = number_grammar()
    h = Grammar.from_string(str(g))
    assert str(h) == str(g)
    assert len(h) == len(g)
    assert parse(h, '3.51e+1').text(h.symbols) == '3.51e+1'


def test_errors():
    with pytest.raises(GrammarSyntaxError):
        syntax.read('S -> | "a"')
    with pytest.raises(GrammarSyntaxError):
        syntax.read('-> "a"')
    with pytest.raises(GrammarSyntaxError):
        syntax.read('S -> "a" @')
    assert issubclass(GrammarSyntaxError, GrammarError)

    with pytest.raises(GrammarError):
        syntax.read('S -> A B C\nA -> "a"\nB -> "b"\nC -> "c"')    # three symbols
    with pytest.raises(GrammarError):
        syntax.read('S -> A\nA -> "a"')                            # unit rule to a non-terminal
    with pytest.raises(GrammarError):
        syntax.read('S -> "a" S')                                  # terminal in a binary rule
    with pytest.raises(GrammarError):
        syntax.read('S -> "ab"')                                   # multi-character terminal
    with pytest.raises(GrammarError):
        syntax.read('start: S\nstart: T\nS -> "a"')
    with pytest.raises(GrammarError):
        syntax.read('% nothing here\n')
