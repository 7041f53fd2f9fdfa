"""
Text notation for CNF grammars.

    % numbers with an optional sign
    start: Number
    Number -> Sign Integer | Integer Digit | "0" | "1"
    Integer -> Integer Digit | "0" | "1"
    Digit -> "0" | "1"
    Sign -> "+" | "-"

Quoted strings are terminals and bare names are non-terminals.  `start:`
names the start symbol (default: the left side of the first rule);
`terminals:` and `nonterminals:` declare symbols that appear in no rule.
"""

import re
from lark.lark import Lark
from lark.visitors import Transformer
from lark.exceptions import LarkError, UnexpectedInput
from ordered_set import OrderedSet

from cyk.exceptions import GrammarError, GrammarSyntaxError
from cyk.grammar import Grammar


class Terminal(str):
    "Name written in double quotes."


def unescape(token):
    "Terminal for a double-quoted string token."
    return Terminal(re.sub(r'\\(.)', r'\1', str(token)[1:-1]))


class GrammarTransformer(Transformer):

    def start_decl(self, x):
        [_, name] = x
        return ('start', str(name))

    def terminals_decl(self, x):
        [_, *ts] = x
        return ('terminals', [unescape(t) for t in ts])

    def nonterminals_decl(self, x):
        [_, *names] = x
        return ('nonterminals', [str(y) for y in names])

    def production(self, x):
        [lhs, _, *alternatives] = x
        return ('production', str(lhs), alternatives)

    def alternative(self, xs):
        return tuple(xs)

    def name(self, x):
        [token] = x
        return str(token)

    def string(self, x):
        [token] = x
        return unescape(token)

    def items(self, xs):
        return list(xs)


class Parser:

    def __init__(self, grammar):
        self.grammar = grammar
        self.parser = Lark(grammar,
                           start = 'items',
                           parser = 'lalr',
                           lexer = 'contextual',
                           transformer = GrammarTransformer())

    def __call__(self, src):
        "Returns the list of declarations and productions in `src`."
        try:
            return self.parser.parse(src)
        except UnexpectedInput as e:
            raise GrammarSyntaxError('\n' + e.get_context(src))
        except LarkError as e:
            raise GrammarSyntaxError(str(e))

    def read(self, src, symbols=None):
        "Build a `Grammar` from `src`."
        start = None
        first = None
        terminals = OrderedSet()
        nonterminals = OrderedSet()
        binary = []
        unit = []

        for item in self(src):
            if item[0] == 'start':
                if start is not None:
                    raise GrammarError(f'start symbol declared twice: {start}, {item[1]}')
                start = item[1]
                nonterminals.add(start)

            elif item[0] == 'terminals':
                terminals.update(item[1])

            elif item[0] == 'nonterminals':
                nonterminals.update(item[1])

            else:
                [_, lhs, alternatives] = item
                nonterminals.add(lhs)
                if first is None: first = lhs
                for rhs in alternatives:
                    for y in rhs:
                        (terminals if isinstance(y, Terminal) else nonterminals).add(y)
                    if len(rhs) == 1:
                        unit.append((lhs, *rhs))
                    elif len(rhs) == 2:
                        binary.append((lhs, *rhs))
                    else:
                        raise GrammarError(f'right side of {lhs} -> {" ".join(rhs)}'
                                           f' must have one or two symbols')

        if start is None: start = first
        if start is None:
            raise GrammarError('grammar has no rules and no start symbol')

        return Grammar(
            start,
            terminals = [str(t) for t in terminals],
            nonterminals = list(nonterminals),
            binary_rules = [tuple(map(str, r)) for r in binary],
            unit_rules = [tuple(map(str, r)) for r in unit],
            symbols = symbols,
        )


grammar = r"""
%import common.ESCAPED_STRING
%import common.WS
%ignore WS
%ignore COMMENT

COMMENT: /%[^\n\r]*/

START.3: /start\s*:/
TERMINALS.3: /terminals\s*:/
NONTERMINALS.3: /nonterminals\s*:/

// a name is the left side of a rule iff an arrow follows it
LHS.2: /[^\W\d][\w']*(?=\s*->)/
NAME: /[^\W\d][\w']*/
ARROW: "->"
STRING: ESCAPED_STRING

items: item*

?item: START NAME                -> start_decl
     | TERMINALS STRING*         -> terminals_decl
     | NONTERMINALS NAME*        -> nonterminals_decl
     | LHS ARROW alternative ("|" alternative)*  -> production

alternative: symbol+

?symbol: NAME    -> name
       | STRING  -> string
"""


parser = Parser(grammar)
read = parser.read
