"""
Router FastAPI para parsing de arquivos TOC.

Endpoints:
    POST /toc/parse       - Upload multipart de um .toc
    POST /toc/parse-text  - Conteudo do TOC em JSON
    GET  /toc/health      - Health check do modulo
"""

import io
import logging
import time
from typing import Dict, List, Optional

from fastapi import APIRouter, File, HTTPException, UploadFile
from pydantic import BaseModel, Field

from ..config import config
from ..parsing import ParsedManifest, ReadFaultError, load

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/toc", tags=["TOC"])


# ============================================================================
# MODELS
# ============================================================================

class ParseTextRequest(BaseModel):
    """Request com o conteudo do TOC como texto."""
    content: str = Field(..., description="Conteudo integral do arquivo .toc")
    strip_values: Optional[bool] = Field(
        None, description="False mantem espacos finais dos valores (default: config)"
    )


class TocStats(BaseModel):
    """Contadores de linhas do parse."""
    lines_read: int
    tag_lines: int
    file_lines: int
    ignored_lines: int


class TocParseResponse(BaseModel):
    """Resultado do parse."""
    tags: Dict[str, str]
    files: List[str]
    stats: TocStats
    latency_ms: float


# ============================================================================
# HELPERS
# ============================================================================

def _check_size(size: int):
    if size > config.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"TOC excede o limite de {config.max_upload_bytes} bytes ({size} bytes)",
        )


def _to_response(toc: ParsedManifest, start: float) -> TocParseResponse:
    data = toc.to_dict()
    return TocParseResponse(
        tags=data["tags"],
        files=data["files"],
        stats=TocStats(**data["stats"]),
        latency_ms=(time.perf_counter() - start) * 1000,
    )


def _parse_stream(stream, strip_values: Optional[bool], source: str) -> ParsedManifest:
    try:
        return load(stream, strip_values=strip_values)
    except ReadFaultError as e:
        logger.warning(f"Falha ao ler TOC ({source}): {e}")
        raise HTTPException(status_code=422, detail=str(e))


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post("/parse", response_model=TocParseResponse)
async def parse_toc(file: UploadFile = File(..., description="Arquivo .toc")):
    """Faz o parse de um arquivo TOC enviado via multipart/form-data."""
    start = time.perf_counter()
    content = await file.read()
    _check_size(len(content))

    toc = _parse_stream(io.BytesIO(content), None, file.filename or "upload")
    logger.info(
        f"TOC {file.filename}: {len(toc.tags)} tags, {len(toc.files)} arquivos"
    )
    return _to_response(toc, start)


@router.post("/parse-text", response_model=TocParseResponse)
async def parse_toc_text(request: ParseTextRequest):
    """Faz o parse de um TOC enviado como texto."""
    start = time.perf_counter()
    try:
        size = len(request.content.encode("utf-8"))
    except UnicodeEncodeError as e:
        # JSON aceita surrogates isolados (\ud800) que nao existem em UTF-8
        logger.warning(f"TOC em texto nao codificavel: {e}")
        raise HTTPException(status_code=422, detail=f"Conteudo nao e texto UTF-8 valido: {e}")
    _check_size(size)

    toc = _parse_stream(io.StringIO(request.content), request.strip_values, "texto")
    return _to_response(toc, start)


@router.get("/health")
async def toc_health():
    """Health check do modulo TOC."""
    return {
        "status": "healthy",
        "module": "toc",
        "encoding": config.encoding,
        "strip_tag_values": config.strip_tag_values,
        "max_upload_bytes": config.max_upload_bytes,
    }
