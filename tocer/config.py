"""
Configurações do tocer.
"""

import logging
import os
from dataclasses import dataclass


@dataclass
class Config:
    """Configuração do parser e do servidor HTTP."""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Parser
    encoding: str = "utf-8-sig"        # Encoding de streams binarios (remove BOM)
    strip_tag_values: bool = True      # False = politica legada (mantem espacos finais)

    # Limite de upload na API (bytes)
    max_upload_bytes: int = 1024 * 1024

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Carrega configuração de variáveis de ambiente."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            encoding=os.getenv("TOCER_ENCODING", "utf-8-sig"),
            strip_tag_values=os.getenv("TOCER_STRIP_TAG_VALUES", "true").lower() == "true",
            max_upload_bytes=int(os.getenv("TOCER_MAX_UPLOAD_BYTES", str(1024 * 1024))),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def log_level_value(self) -> int:
        """Nivel numerico do logging; nome desconhecido cai em INFO."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO


# Singleton
config = Config.from_env()
