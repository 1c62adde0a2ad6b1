"""Errores del compilador: léxicos, sintácticos y de evaluación."""


class CompileError(Exception):
    """Error con posición en el texto fuente."""

    def __init__(self, offset: int, message: str):
        super().__init__(f"{message} (offset {offset})")
        self.offset = offset
        self.message = message

    def diagnostic(self, source: str) -> str:
        """Two-line caret diagnostic: the source line holding `offset`, then a caret under it.

        Tabs before the caret are kept so it lines up with the source line.
        """
        start = source.rfind('\n', 0, self.offset) + 1
        end = source.find('\n', self.offset)
        if end == -1:
            end = len(source)
        line = source[start:end].rstrip('\r')
        pad = ''.join(c if c == '\t' else ' ' for c in source[start:self.offset])
        return f"{line}\n{pad}^ {self.message}"


class LexError(CompileError):
    def __init__(self, offset: int, character: str, message: str = None):
        if message is None:
            message = f"invalid token '{character}'"
        super().__init__(offset, message)
        self.character = character


class ParseError(CompileError):
    pass


class ExpectedExpression(ParseError):
    def __init__(self, offset: int):
        super().__init__(offset, "expected an expression")


class ExpectedPunctuator(ParseError):
    def __init__(self, offset: int, expected: str):
        super().__init__(offset, f"expected '{expected}'")
        self.expected = expected


class UnexpectedTrailingInput(ParseError):
    def __init__(self, offset: int):
        super().__init__(offset, "unexpected trailing input")


class EvaluationError(Exception):
    """Fallo en tiempo de ejecución del intérprete (división por cero, desbordamiento)."""
    pass
