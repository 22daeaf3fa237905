"""
Modelos do parser de TOC.

ParsedManifest e o snapshot imutavel devolvido por load();
ClassifiedLine e o estado transitorio de cada linha.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class LineKind(str, Enum):
    """Categoria de uma linha do TOC."""
    TAG = "tag"
    FILE = "file"
    IGNORED = "ignored"  # comentario, linha em branco ou tag malformada


@dataclass(frozen=True)
class ClassifiedLine:
    """Resultado da classificacao de uma unica linha (sem terminador)."""
    kind: LineKind
    text: str                   # linha original, sem \n / \r\n
    key: Optional[str] = None   # so para TAG
    value: Optional[str] = None  # valor da TAG ou caminho do FILE


@dataclass(frozen=True)
class ParseStats:
    """Contadores de linhas. tag_lines + file_lines + ignored_lines == lines_read."""
    lines_read: int = 0
    tag_lines: int = 0
    file_lines: int = 0
    ignored_lines: int = 0

    def __add__(self, other: "ParseStats") -> "ParseStats":
        return ParseStats(
            lines_read=self.lines_read + other.lines_read,
            tag_lines=self.tag_lines + other.tag_lines,
            file_lines=self.file_lines + other.file_lines,
            ignored_lines=self.ignored_lines + other.ignored_lines,
        )


def _freeze_tags(tags: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(tags))


@dataclass(frozen=True)
class ParsedManifest:
    """
    Conteudo de um arquivo TOC.

    tags: chave -> valor (a ultima ocorrencia de uma chave vence)
    files: caminhos na ordem em que aparecem, duplicatas preservadas
    """
    tags: Mapping[str, str] = field(default_factory=dict)
    files: tuple = ()
    stats: ParseStats = field(default_factory=ParseStats)

    def __post_init__(self):
        # Congela as colecoes recebidas (dict/list) para o snapshot ser imutavel
        object.__setattr__(self, "tags", _freeze_tags(self.tags))
        object.__setattr__(self, "files", tuple(self.files))

    def merged_with(self, other: "ParsedManifest") -> "ParsedManifest":
        """
        Merge com vies a direita: arquivos concatenados, tags de `other`
        sobrescrevem as deste manifest.
        """
        tags = dict(self.tags)
        tags.update(other.tags)
        return ParsedManifest(
            tags=tags,
            files=self.files + other.files,
            stats=self.stats + other.stats,
        )

    def to_dict(self) -> dict:
        """Converte para dicionario serializavel em JSON."""
        return {
            "tags": dict(self.tags),
            "files": list(self.files),
            "stats": {
                "lines_read": self.stats.lines_read,
                "tag_lines": self.stats.tag_lines,
                "file_lines": self.stats.file_lines,
                "ignored_lines": self.stats.ignored_lines,
            },
        }
