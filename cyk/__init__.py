from cyk.symbol import Symbol, SymbolTable
from cyk.exceptions import *
from cyk.grammar import Grammar, GrammarBuilder, Rule
from cyk.chart import Span, Node, Leaf, Unary, Binary, Cell, Chart
from cyk.parser import ChartParser, parse, rightmost, leftmost
from cyk.pretty import pp, PrettyPrinter
from cyk import syntax
from cyk.grammars import number_grammar, balanced_grammar, ambiguous_grammar
