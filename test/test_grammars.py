from cyk import ChartParser, number_grammar, balanced_grammar, ambiguous_grammar


def test_number_grammar():
    p = ChartParser(number_grammar())
    for x in ['0', '10', '3.14', '3.51e+1', '6.02e+23', '1.6e-19']:
        assert p.recognize(x), x
    for x in ['', '.', 'e', '1e+5', '3.14e', '3.14e+', '--1', '1.2.3']:
        assert not p.recognize(x), x


def test_number_grammar_without_exponent():
    g = number_grammar(exponent=False)
    assert 'e' not in g
    p = ChartParser(g)
    assert p.recognize('3.14')
    assert not p.recognize('3.51e+1')


def test_balanced_grammar():
    p = ChartParser(balanced_grammar())
    assert p.recognize('(()(()))')
    assert not p.recognize('(()(())')


def test_ambiguous_grammar():
    g = ambiguous_grammar()
    p = ChartParser(g)
    for n in range(1, 8):
        assert p.parse('a' * n).span.length == n
