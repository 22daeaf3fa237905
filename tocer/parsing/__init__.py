"""
Parser de arquivos TOC (manifesto de addon: tags "## Chave: Valor" + lista de arquivos).
"""

from .errors import TocError, ReadFaultError, PatternCompilationError
from .toc_models import ParsedManifest, ParseStats, ClassifiedLine, LineKind
from .toc_parser import classify_line, load, loads, load_file

__all__ = [
    # Errors
    "TocError",
    "ReadFaultError",
    "PatternCompilationError",
    # Models
    "ParsedManifest",
    "ParseStats",
    "ClassifiedLine",
    "LineKind",
    # Parser
    "classify_line",
    "load",
    "loads",
    "load_file",
]
