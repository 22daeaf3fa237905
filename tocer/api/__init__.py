"""
API HTTP do tocer.
"""

from .router import router as toc_router, ParseTextRequest, TocParseResponse, TocStats

__all__ = [
    "toc_router",
    "ParseTextRequest",
    "TocParseResponse",
    "TocStats",
]
