"""
tocer - FastAPI para parsing de arquivos TOC.

Endpoints:
    POST /toc/parse       - Parse de um .toc enviado via multipart
    POST /toc/parse-text  - Parse de um TOC enviado como texto (JSON)
    GET  /health          - Health check
    GET  /healthz         - Liveness probe (Kubernetes)

Uso:
    uvicorn tocer.main:app --host 0.0.0.0 --port 8000
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import BaseModel

from . import __version__
from .api import toc_router
from .config import config

# Logging
logging.basicConfig(
    level=config.log_level_value(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Response do health check."""

    status: str
    version: str
    uptime_seconds: float


# Tempo de início
_start_time = time.time()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle do app - so registra configuracao no startup."""
    logger.info("=== tocer iniciando ===")
    logger.info(f"Encoding: {config.encoding}")
    logger.info(f"Strip tag values: {config.strip_tag_values}")
    logger.info(f"Max upload: {config.max_upload_bytes} bytes")

    yield

    logger.info("=== tocer encerrando ===")


app = FastAPI(
    title="tocer",
    description="Parser de arquivos TOC (tags de metadados + lista de arquivos)",
    version=__version__,
    lifespan=lifespan,
)

# Routers
app.include_router(toc_router)


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
    )


@app.get("/healthz")
async def healthz():
    """Liveness probe (Kubernetes)."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.host, port=config.port)
