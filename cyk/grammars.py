"""
Sample grammars
"""

from cyk.grammar import GrammarBuilder


DIGITS = '0123456789'


def number_grammar(symbols=None, exponent=True):
    """
    Numeric literals: digits, an optional fraction after `.` and an optional
    signed exponent after `e`, e.g. `3.51e+1`.  With `exponent=False` the `e`
    terminal is left out of the grammar.
    """
    digits = [[d] for d in DIGITS]
    b = (GrammarBuilder(symbols)
         .start('Number')
         .nonterminals('Number', 'N1', 'Integer', 'Fraction', 'T1', 'Scale', 'N2', 'T2',
                       'Digit', 'Sign')
         .terminals(*DIGITS, '.', '+', '-'))
    if exponent:
        b.terminals('e')
    b.rule('Number', *digits, ['Integer', 'Digit'], ['N1', 'Scale'], ['Integer', 'Fraction'])
    b.rule('N1', ['Integer', 'Fraction'])
    b.rule('Integer', *digits, ['Integer', 'Digit'])
    b.rule('Fraction', ['T1', 'Integer'])
    b.rule('T1', '.')
    b.rule('Scale', ['N2', 'Integer'])
    b.rule('N2', ['T2', 'Sign'])
    if exponent:
        b.rule('T2', 'e')
    b.rule('Digit', *digits)
    b.rule('Sign', '+', '-')
    return b.build()


def balanced_grammar(symbols=None):
    "Non-empty balanced parentheses."
    return (GrammarBuilder(symbols)
            .start('S')
            .nonterminals('S', 'L', 'R', 'A')
            .terminals('(', ')')
            .rule('S', ['S', 'S'], ['L', 'R'], ['L', 'A'])
            .rule('A', ['S', 'R'])
            .rule('L', '(')
            .rule('R', ')')
            .build())


def ambiguous_grammar(symbols=None):
    "`S -> S S | a`: every string of two or more `a`s has several derivations."
    return (GrammarBuilder(symbols)
            .start('S')
            .nonterminals('S')
            .terminals('a')
            .rule('S', ['S', 'S'], 'a')
            .build())
