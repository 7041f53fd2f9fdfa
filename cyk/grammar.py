"""
Context-free grammars in Chomsky Normal Form.

Every production is either binary, `A -> B C`, or a unit rule rewriting a
non-terminal to a single terminal, `A -> "a"`.  Terminals are single
characters since the chart parser reads its input one character at a time.
"""

from typing import NamedTuple, Tuple
from collections import defaultdict
from frozendict import frozendict
from ordered_set import OrderedSet

from cyk.exceptions import GrammarError
from cyk.symbol import Symbol, SymbolTable


NOTHING = frozenset()


def quote(t):
    "Double-quoted terminal, as written in grammar text."
    return '"' + t.replace('\\', '\\\\').replace('"', '\\"') + '"'


class Rule(NamedTuple):
    lhs: Symbol
    rhs: Tuple[Symbol, ...]

    @property
    def is_unit(self):
        return len(self.rhs) == 1

    @property
    def is_binary(self):
        return len(self.rhs) == 2


class Grammar:
    """
    Immutable CNF grammar over a `SymbolTable`.

    Symbols are passed in by name; the constructor interns them into
    `symbols` (a fresh table unless one is supplied) and validates the
    declarations, raising `GrammarError` on the first inconsistency.
    """

    def __init__(self, start, terminals, nonterminals, binary_rules=(), unit_rules=(),
                 symbols=None):
        if symbols is None: symbols = SymbolTable()
        self.symbols = symbols

        terminals = list(terminals)
        nonterminals = list(nonterminals)
        binary_rules = list(binary_rules)
        unit_rules = list(unit_rules)

        # Everything is checked by name so that a rejected grammar leaves no
        # trace in a shared symbol table.
        self._validate(start, terminals, nonterminals, binary_rules, unit_rules)

        intern = symbols.intern
        self.start = intern(start)
        self.terminals = frozenset(map(intern, terminals))
        self.nonterminals = frozenset(map(intern, nonterminals))
        # frozensets are for membership; these keep declaration order
        self._terminal_order = OrderedSet(map(intern, terminals))
        self._nonterminal_order = OrderedSet(map(intern, nonterminals))

        binary = defaultdict(OrderedSet)
        unit = defaultdict(OrderedSet)
        for [a, b, c] in binary_rules:
            binary[intern(a)].add((intern(b), intern(c)))
        for [a, b] in unit_rules:
            unit[intern(a)].add(intern(b))

        self.binary_rules = frozendict({a: tuple(v) for a, v in binary.items()})
        self.unit_rules = frozendict({a: tuple(v) for a, v in unit.items()})

        # Reverse indexes answering the parser's queries.
        unit_parents = defaultdict(OrderedSet)
        successors = defaultdict(OrderedSet)
        binary_parents = defaultdict(OrderedSet)
        for a, ts in self.unit_rules.items():
            for t in ts:
                unit_parents[t].add(a)
        for a, pairs in self.binary_rules.items():
            for (b, c) in pairs:
                successors[b].add(c)
                binary_parents[b, c].add(a)
        self._unit_parents = frozendict({k: tuple(v) for k, v in unit_parents.items()})
        self._successors = frozendict({k: frozenset(v) for k, v in successors.items()})
        self._binary_parents = frozendict({k: tuple(v) for k, v in binary_parents.items()})

    def _validate(self, start, terminals, nonterminals, binary_rules, unit_rules):
        for x in nonterminals:
            if not isinstance(x, str) or not x:
                raise GrammarError(f'non-terminal {x!r} must be a non-empty string')
        for t in terminals:
            if not isinstance(t, str) or len(t) != 1:
                raise GrammarError(f'terminal {t!r} must be a single character')

        T = set(terminals)
        N = set(nonterminals)
        both = [x for x in terminals if x in N]
        if both:
            raise GrammarError(f'declared as both terminal and non-terminal: {", ".join(both)}')
        if not isinstance(start, str) or start not in N:
            raise GrammarError(f'start symbol {start!r} is not a declared non-terminal')

        def check_lhs(a, rule):
            if not isinstance(a, str) or a not in N:
                raise GrammarError(f'left side of {self._fmt(rule)} is not a declared non-terminal')

        def check_declared(x, rule):
            if not isinstance(x, str) or x not in T and x not in N:
                raise GrammarError(f'{x!r} in {self._fmt(rule)} is not a declared symbol')

        for rule in binary_rules:
            if len(rule) != 3:
                raise GrammarError(f'binary rule must be (left, right1, right2), got {rule!r}')
            [a, b, c] = rule
            check_lhs(a, rule)
            for x in (b, c):
                check_declared(x, rule)
                if x in T:
                    raise GrammarError(f'binary rule {self._fmt(rule)} rewrites to terminal {x!r}')
        for rule in unit_rules:
            if len(rule) != 2:
                raise GrammarError(f'unit rule must be (left, terminal), got {rule!r}')
            [a, b] = rule
            check_lhs(a, rule)
            check_declared(b, rule)
            if b not in T:
                raise GrammarError(f'unit rule {self._fmt(rule)} must rewrite to a terminal')

    def _fmt(self, rule):
        [a, *rest] = rule
        return f'{a} -> {" ".join(map(str, rest))}'

    @classmethod
    def from_string(cls, src, symbols=None):
        "Read a grammar written in the notation of `cyk.syntax`."
        from cyk.syntax import read
        return read(src, symbols=symbols)

    #___________________________________________________________________________
    # Queries used by the chart parser

    def is_terminal(self, x: Symbol) -> bool:
        return x in self.terminals

    def is_non_terminal(self, x: Symbol) -> bool:
        return x in self.nonterminals

    def unit_parents(self, terminal: Symbol):
        "Non-terminals `A` with a rule `A -> terminal`."
        return self._unit_parents.get(terminal, NOTHING)

    def successors_after(self, base: Symbol):
        "Symbols `C` such that some rule has right side `base C`."
        return self._successors.get(base, NOTHING)

    def binary_parents(self, base: Symbol, suffix: Symbol):
        "Non-terminals `A` with a rule `A -> base suffix`."
        return self._binary_parents.get((base, suffix), NOTHING)

    #___________________________________________________________________________
    # Introspection

    def rules(self):
        "Iterate over all rules; unit rules first within each left side."
        for a in self._nonterminal_order:
            for t in self.unit_rules.get(a, ()):
                yield Rule(a, (t,))
            for pair in self.binary_rules.get(a, ()):
                yield Rule(a, pair)

    def first(self, symbol: Symbol):
        "First right-hand symbol of each rule for `symbol`."
        return OrderedSet(r.rhs[0] for r in self.rules() if r.lhs == symbol)

    def name(self, x: Symbol) -> str:
        return self.symbols.resolve(x)

    def rule_str(self, rule):
        rhs = ' '.join(quote(self.name(x)) if self.is_terminal(x) else self.name(x)
                       for x in rule.rhs)
        return f'{self.name(rule.lhs)} -> {rhs}'

    def __contains__(self, name):
        h = self.symbols.get(name)
        return h is not None and (self.is_terminal(h) or self.is_non_terminal(h))

    def __len__(self):
        return sum(len(v) for v in self.unit_rules.values()) \
            + sum(len(v) for v in self.binary_rules.values())

    def __iter__(self):
        return self.rules()

    def __str__(self):
        return '\n'.join([
            f'start: {self.name(self.start)}',
            'terminals: ' + ' '.join(quote(self.name(x)) for x in self._terminal_order),
            'nonterminals: ' + ' '.join(map(self.name, self._nonterminal_order)),
        ] + [self.rule_str(r) for r in self.rules()])

    def __repr__(self):
        return f'<Grammar start={self.name(self.start)} rules={len(self)}>'


class GrammarBuilder:
    """
    Collects declarations and rules by name, then builds a `Grammar`.

    >>> g = (GrammarBuilder()
    ...      .start('S')
    ...      .nonterminals('S')
    ...      .terminals('a')
    ...      .rule('S', ['S', 'S'], ['a'])
    ...      .build())
    """

    def __init__(self, symbols=None):
        self.symbols = symbols
        self._start = None
        self._terminals = []
        self._nonterminals = []
        self._rules = []

    def start(self, name):
        self._start = name
        return self

    def terminals(self, *names):
        self._terminals.extend(names)
        return self

    def nonterminals(self, *names):
        self._nonterminals.extend(names)
        return self

    def rule(self, lhs, *alternatives):
        "Each alternative is a sequence of one or two names, or a bare name."
        for rhs in alternatives:
            rhs = (rhs,) if isinstance(rhs, str) else tuple(rhs)
            self._rules.append((lhs, rhs))
        return self

    def build(self):
        binary = []
        unit = []
        for lhs, rhs in self._rules:
            if len(rhs) == 1:
                unit.append((lhs, *rhs))
            elif len(rhs) == 2:
                binary.append((lhs, *rhs))
            else:
                raise GrammarError(f'right side of {lhs} -> {" ".join(rhs)} must have one or two symbols')
        return Grammar(
            self._start,
            terminals = list(OrderedSet(self._terminals)),
            nonterminals = list(OrderedSet(self._nonterminals)),
            binary_rules = binary,
            unit_rules = unit,
            symbols = self.symbols,
        )
