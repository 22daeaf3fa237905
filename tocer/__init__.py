"""
tocer - Leitura de arquivos TOC (tags de metadados + lista ordenada de arquivos).
"""

from .parsing import (
    TocError,
    ReadFaultError,
    PatternCompilationError,
    ParsedManifest,
    ParseStats,
    load,
    loads,
    load_file,
)

__version__ = "0.1.0"

__all__ = [
    "TocError",
    "ReadFaultError",
    "PatternCompilationError",
    "ParsedManifest",
    "ParseStats",
    "load",
    "loads",
    "load_file",
]
