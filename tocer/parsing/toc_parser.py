"""
TocParser - Classificacao linha a linha de arquivos TOC.

Cada linha cai em exatamente uma categoria, nesta ordem de prioridade:
    1. TAG      "## Chave: Valor"  (precisa de ":" e chave nao vazia)
    2. IGNORED  qualquer outra linha iniciada por "#" (inclusive tag malformada)
    3. FILE     o resto, com espacos das bordas removidos
Linhas em branco tambem sao IGNORED.

Uso:
    with open("Bagnon.toc", encoding="utf-8-sig") as f:
        toc = load(f)
    toc.tags["Interface"]  # "11302"
    toc.files              # ("main.lua", ...)
"""

import codecs
import io
import logging
import re
from pathlib import Path
from typing import IO, Iterable, Iterator, Optional, Union

from ..config import config
from .errors import PatternCompilationError, ReadFaultError
from .toc_models import ClassifiedLine, LineKind, ParsedManifest, ParseStats

logger = logging.getLogger(__name__)


# === Regexes ===


def _compile_pattern(pattern: str) -> "re.Pattern":
    """Compila um padrao fixo no import; falha aqui e bug, nao conteudo ruim."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternCompilationError(f"Regex invalida {pattern!r}: {e}", pattern=pattern) from e


# "##" + chave (ate o primeiro ":") + valor
RE_TAG = _compile_pattern(r"^##(?P<key>[^:]*):(?P<value>.*)$")

COMMENT_PREFIX = "#"
BOM = "\ufeff"

Stream = Union[IO[str], IO[bytes], Iterable[str], Iterable[bytes]]


def _strip_terminator(line: str) -> str:
    """Remove exatamente um terminador (\\n ou \\r\\n) do fim da linha."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def classify_line(line: str, strip_values: bool = True) -> ClassifiedLine:
    """
    Classifica uma linha ja sem terminador.

    Args:
        line: Linha do TOC (sem \\n)
        strip_values: True remove espacos das duas bordas do valor da tag;
            False mantem espacos finais (comportamento legado)

    Returns:
        ClassifiedLine com kind TAG, FILE ou IGNORED
    """
    m = RE_TAG.match(line)
    if m:
        key = m.group("key").strip()
        if key:
            value = m.group("value")
            value = value.strip() if strip_values else value.lstrip()
            return ClassifiedLine(kind=LineKind.TAG, text=line, key=key, value=value)
        logger.debug(f"TocParser: tag sem chave descartada: {line!r}")
        return ClassifiedLine(kind=LineKind.IGNORED, text=line)

    if line.startswith(COMMENT_PREFIX):
        if line.startswith("##"):
            logger.debug(f"TocParser: tag sem ':' descartada: {line!r}")
        return ClassifiedLine(kind=LineKind.IGNORED, text=line)

    path = line.strip()
    if not path:
        return ClassifiedLine(kind=LineKind.IGNORED, text=line)
    return ClassifiedLine(kind=LineKind.FILE, text=line, value=path)


def _iter_lines(stream: Stream, encoding: str) -> Iterator[str]:
    """
    Le o stream linha a linha, decodificando bytes se necessario.

    Fim da entrada encerra a iteracao normalmente; qualquer falha de leitura
    vira ReadFaultError.
    """
    line_number = 0
    decoder = None
    try:
        for raw in stream:
            if isinstance(raw, (bytes, bytearray)):
                # Um unico decoder para o stream inteiro: utf-8-sig so remove o BOM inicial
                if decoder is None:
                    decoder = codecs.getincrementaldecoder(encoding)()
                raw = decoder.decode(raw)
            line = _strip_terminator(raw)
            if line_number == 0 and line.startswith(BOM):
                line = line[len(BOM):]
            line_number += 1
            yield line
        if decoder is not None:
            decoder.decode(b"", final=True)
    except (OSError, ValueError, LookupError) as e:
        # ValueError cobre UnicodeDecodeError e stream fechado; LookupError = encoding desconhecido
        raise ReadFaultError(f"Falha ao ler TOC: {e}", line_number=line_number) from e


def load(stream: Stream, strip_values: Optional[bool] = None, encoding: Optional[str] = None) -> ParsedManifest:
    """
    Carrega um TOC a partir de um stream de texto ou bytes.

    O stream pertence ao chamador (abrir e fechar e responsabilidade dele).
    Chaves duplicadas sao sobrescritas silenciosamente.

    Args:
        stream: Arquivo aberto, io.StringIO/io.BytesIO ou iteravel de linhas
        strip_values: Politica de trim dos valores (default: config.strip_tag_values)
        encoding: Encoding para streams binarios (default: config.encoding)

    Returns:
        ParsedManifest com tags, files e stats

    Raises:
        ReadFaultError: Se o stream falhar antes do fim da entrada
        TypeError: Se receber str/bytes em vez de um stream
    """
    if isinstance(stream, (str, bytes, bytearray)):
        raise TypeError("load() espera um stream; use loads() para texto")
    if strip_values is None:
        strip_values = config.strip_tag_values
    if encoding is None:
        encoding = config.encoding

    tags = {}
    files = []
    counts = {LineKind.TAG: 0, LineKind.FILE: 0, LineKind.IGNORED: 0}
    lines_read = 0

    for lines_read, line in enumerate(_iter_lines(stream, encoding), start=1):
        classified = classify_line(line, strip_values=strip_values)
        counts[classified.kind] += 1

        if classified.kind == LineKind.TAG:
            if classified.key in tags:
                logger.debug(f"TocParser: tag '{classified.key}' sobrescrita")
            tags[classified.key] = classified.value
        elif classified.kind == LineKind.FILE:
            files.append(classified.value)

    stats = ParseStats(
        lines_read=lines_read,
        tag_lines=counts[LineKind.TAG],
        file_lines=counts[LineKind.FILE],
        ignored_lines=counts[LineKind.IGNORED],
    )
    logger.debug(
        f"TocParser: {stats.lines_read} linhas, {len(tags)} tags, "
        f"{len(files)} arquivos, {stats.ignored_lines} ignoradas"
    )
    return ParsedManifest(tags=tags, files=files, stats=stats)


def loads(text: str, strip_values: Optional[bool] = None) -> ParsedManifest:
    """Carrega um TOC a partir de uma string."""
    return load(io.StringIO(text), strip_values=strip_values)


def load_file(path: Union[str, Path], strip_values: Optional[bool] = None, encoding: Optional[str] = None) -> ParsedManifest:
    """
    Abre o arquivo em modo binario e delega para load().

    Raises:
        ReadFaultError: Se o arquivo nao puder ser aberto ou lido
    """
    path = Path(path)
    try:
        f = path.open("rb")
    except OSError as e:
        raise ReadFaultError(f"Nao foi possivel abrir {path}: {e}") from e

    with f:
        return load(f, strip_values=strip_values, encoding=encoding)
