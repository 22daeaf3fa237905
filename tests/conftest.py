"""
Configuração global do pytest para testes do tocer.

Este arquivo configura o PYTHONPATH para que os imports funcionem corretamente
e define fixtures compartilhadas.
"""

import sys
from pathlib import Path

import pytest

# Adiciona o diretório raiz do projeto ao path
root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))


# TOC real do Bagnon (com comentarios, tag malformada e caminhos Windows)
BAGNON_TOC = (
    "## Interface: 11302\n"
    "## Title: |cff20ff20Bagnon|r\n"
    "## Author: Tuller & Jaliborc (João Cardoso)\n"
    "## Version: 8.2.16\n"
    "## SavedVariables: Bagnon_Sets\n"
    "## OptionalDeps: BagBrother, WoWUnit\n"
    "# Bibliotecas\n"
    "libs\\LibStub\\LibStub.lua\n"
    "## bad comment\n"
    "\n"
    "main.lua\n"
    "components\\frame.lua\n"
    "components\\frame.xml\n"
)


@pytest.fixture
def bagnon_toc() -> str:
    """Conteudo de um TOC completo."""
    return BAGNON_TOC


@pytest.fixture
def toc_file(tmp_path) -> Path:
    """Arquivo .toc em disco (UTF-8 com BOM e terminadores CRLF)."""
    path = tmp_path / "Bagnon.toc"
    path.write_bytes(BAGNON_TOC.replace("\n", "\r\n").encode("utf-8-sig"))
    return path
