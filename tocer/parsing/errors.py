"""
Erros do parser de TOC.

Taxonomia:
- ReadFaultError: o stream falhou antes do fim da entrada
- PatternCompilationError: os padroes fixos nao compilaram no import

Nao existe erro de conteudo: linha malformada vira comentario.
"""


class TocError(Exception):
    """Erro base do parser de TOC."""
    pass


class ReadFaultError(TocError):
    """Falha de leitura do stream (I/O, decodificacao, stream fechado)."""

    def __init__(self, message: str, line_number: int = 0):
        self.line_number = line_number
        super().__init__(message)

    def __str__(self):
        if self.line_number:
            return f"{self.args[0]} (apos linha {self.line_number})"
        return self.args[0]


class PatternCompilationError(TocError):
    """Padrao regex constante nao compilou. Erro de programacao, nao recuperavel."""

    def __init__(self, message: str, pattern: str = ""):
        self.pattern = pattern
        super().__init__(message)
