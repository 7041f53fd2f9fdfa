from typing import NamedTuple


class GrammarError(Exception):
    pass


class GrammarSyntaxError(GrammarError):
    pass


class Diagnostic(NamedTuple):
    "An input character that no unit rule accounts for."
    position: int
    char: str
    message: str = 'unrecognized character'

    def __str__(self):
        if not self.char:
            return f'{self.position}: {self.message}'
        return f'{self.position}: {self.message} {self.char!r}'


class ParseFailure(Exception):
    """
    The start symbol does not cover the whole input.

    `diagnostics` lists every unrecognized character; it is empty when each
    character was recognized but no derivation reached the start symbol.
    """

    def __init__(self, message, diagnostics=(), chart=None):
        self.diagnostics = list(diagnostics)
        self.chart = chart
        super().__init__(message)

    @property
    def lexical(self):
        "Did the failure come from unrecognized characters?"
        return bool(self.diagnostics)

    def __str__(self):
        msg = super().__str__()
        if not self.diagnostics: return msg
        return msg + '\n' + '\n'.join(f'  {d}' for d in self.diagnostics)


class EmptyInput(ParseFailure):
    pass


class InputTooLong(ParseFailure):
    pass
