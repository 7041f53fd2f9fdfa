"""
Cocke-Younger-Kasami chart parsing.

The chart is filled bottom-up, shortest spans first.  Each span keeps the
nodes of a single split point, chosen by an ambiguity-resolution policy
(`rightmost` by default), so the parser returns one derivation, never a
forest.
"""

import logging

from cyk.chart import Span, Leaf, Unary, Binary, Cell, Chart
from cyk.exceptions import Diagnostic, ParseFailure, EmptyInput, InputTooLong


logger = logging.getLogger(__name__)


#_______________________________________________________________________________
# Ambiguity resolution
#
# A policy receives the non-empty candidate cells for one span as a list of
# `(split, cell)` pairs, in increasing order of `split` (the length of the
# left sub-span), and returns the cell to commit or None.

def rightmost(candidates):
    "The last split that derives anything wins."
    return candidates[-1][1] if candidates else None


def leftmost(candidates):
    "The first split that derives anything wins."
    return candidates[0][1] if candidates else None


DEFAULT_RESOLVE = rightmost


class ChartParser:
    """
    CYK parser for a CNF `Grammar`.

    `resolve` picks the committed cell among competing split points and
    `max_length`, when given, rejects longer inputs before any work is done
    (the fill is cubic in the input length).
    """

    def __init__(self, grammar, resolve=None, max_length=None):
        self.grammar = grammar
        self.resolve = resolve if resolve is not None else DEFAULT_RESOLVE
        self.max_length = max_length

    def __call__(self, text):
        return self.parse(text)

    def parse(self, text):
        "Return the root node for `text` or raise `ParseFailure`."
        chart = self.fill(text)
        g = self.grammar

        if chart.n == 0:
            raise EmptyInput('empty input', chart.diagnostics, chart)

        top = chart.top()
        root = top.lookup(g.start) if top is not None else None
        if root is not None:
            logger.debug('parsed %d characters as %s', chart.n, g.name(g.start))
            return root

        if chart.diagnostics:
            msg = f'{len(chart.diagnostics)} unrecognized character(s)'
        else:
            msg = f'no derivation of {g.name(g.start)} covers the input'
        logger.debug('parse failed: %s', msg)
        raise ParseFailure(msg, chart.diagnostics, chart)

    def recognize(self, text):
        "Is `text` in the language of the grammar?"
        chart = self.fill(text)
        return chart.accepts(self.grammar.start)

    def fill(self, text):
        """
        Build the chart for `text`.  Unrecognized characters are recorded in
        `chart.diagnostics` instead of raising.
        """
        assert isinstance(text, str), f'got {type(text).__name__}: {text!r}'
        n = len(text)

        if self.max_length is not None and n > self.max_length:
            raise InputTooLong(f'input has {n} characters; limit is {self.max_length}')

        chart = Chart(n)
        if n == 0:
            chart.diagnostics.append(Diagnostic(0, '', 'empty input'))
            return chart

        for i, c in enumerate(text):
            cell = self._base(chart, i, c)
            if cell is not None:
                chart.commit(cell)

        for length in range(2, n + 1):
            for start in range(n - length + 1):
                cell = self._combine(chart, Span(start, length))
                if cell is not None:
                    chart.commit(cell)

        return chart

    def _base(self, chart, i, c):
        "Cell for the single character `c` at position `i`."
        g = self.grammar
        span = Span(i, 1)
        t = g.symbols.get(c)
        parents = g.unit_parents(t) if t is not None and g.is_terminal(t) else ()
        if not parents:
            logger.debug('unrecognized character %r at %d', c, i)
            chart.diagnostics.append(Diagnostic(i, c))
            return
        return Cell(span, [Unary(a, Leaf(t, span)) for a in parents])

    def _combine(self, chart, span):
        "Cell for `span` (length >= 2) from the committed cells beneath it."
        g = self.grammar
        candidates = []
        for k in range(1, span.length):
            left, right = span.split(k)
            lcell = chart.get(left)
            rcell = chart.get(right)
            if lcell is None or rcell is None or lcell.is_empty() or rcell.is_empty():
                continue
            cell = Cell(span)
            for cur in lcell:
                succ = g.successors_after(cur.kind)
                if not succ: continue
                for suf in rcell:
                    if suf.kind not in succ: continue
                    for a in g.binary_parents(cur.kind, suf.kind):
                        cell.add(Binary(a, cur, suf))
            if not cell.is_empty():
                candidates.append((k, cell))

        winner = self.resolve(candidates)
        if winner is None or winner.is_empty():
            return
        if len(candidates) > 1:
            logger.debug('%r: %d competing splits %s, committed %s', span, len(candidates),
                         [k for k, _ in candidates],
                         next((k for k, c in candidates if c is winner), None))
        return winner


def parse(grammar, text, **kwargs):
    "Parse `text` with a fresh `ChartParser`; see `ChartParser.parse`."
    return ChartParser(grammar, **kwargs).parse(text)
