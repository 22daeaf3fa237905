#!/usr/bin/env python3
"""
CLI - Lê um arquivo TOC e imprime tags e arquivos.

Uso:
    tocer Bagnon.toc
    tocer Bagnon.toc --json
    python -m tocer.cli Bagnon.toc --legacy-values -v
"""

import argparse
import json
import logging
import sys

from .config import config
from .parsing import TocError, load_file

logger = logging.getLogger(__name__)


def _print_manifest(toc, as_json: bool) -> None:
    if as_json:
        print(json.dumps(toc.to_dict(), indent=2, ensure_ascii=False))
        return

    print("Tags:")
    for key in sorted(toc.tags):
        print(f"  {key}: {toc.tags[key]}")
    print(f"Arquivos ({len(toc.files)}):")
    for path in toc.files:
        print(f"  {path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tocer",
        description="Lê um arquivo TOC (tags ## Chave: Valor + lista de arquivos)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exemplos:
    tocer Bagnon.toc
    tocer Bagnon.toc --json
        """,
    )
    parser.add_argument("path", help="Caminho do arquivo .toc")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Imprime o resultado como JSON",
    )
    parser.add_argument(
        "--encoding",
        default=config.encoding,
        help=f"Encoding do arquivo (default: {config.encoding})",
    )
    parser.add_argument(
        "--legacy-values",
        action="store_true",
        help="Mantem espacos finais nos valores das tags",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Logging em nivel DEBUG",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level_value(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    strip_values = False if args.legacy_values else None
    try:
        toc = load_file(args.path, strip_values=strip_values, encoding=args.encoding)
    except TocError as e:
        logger.error(f"Erro ao ler {args.path}: {e}")
        return 1

    _print_manifest(toc, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
