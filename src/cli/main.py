"""Export a file of UVCIs (one per line) as a Cypher graph script, flat lines or listings.

Usage:
    uvci-graph covid_uvci.txt graph_cypher.txt
    uvci-graph --format flat covid_uvci.txt uvci.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from src.config.logging import configure_logging
from src.config.settings import OutputFormat, Settings, load_settings
from src.export.flat import to_flat_line
from src.export.graph import render_graph_script
from src.export.listing import to_listing
from src.uvci.parser import parse_many

logger = logging.getLogger(__name__)


class ExportError(RuntimeError):
    """Raised when the input cannot be read or the output cannot be written."""


def _render_flat(cert_ids: list[str]) -> str:
    return "".join(to_flat_line(record) + "\n" for record in parse_many(cert_ids))


def _render_listing(cert_ids: list[str]) -> str:
    return "\n".join(to_listing(record) for record in parse_many(cert_ids))


_RENDERERS: dict[OutputFormat, Callable[[list[str]], str]] = {
    "graph": render_graph_script,
    "flat": _render_flat,
    "listing": _render_listing,
}


def read_cert_ids(path: Path) -> list[str]:
    """Read one identifier per line; blank lines are kept and parsed like any other."""

    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise ExportError(f"couldn't read {path}: {exc}") from exc


def write_output(path: Path, text: str, *, encoding: str) -> None:
    """Write the exported text, replacing any existing file."""

    try:
        path.write_text(text, encoding=encoding)
    except (OSError, UnicodeEncodeError) as exc:
        raise ExportError(f"couldn't write {path}: {exc}") from exc


def export(
        input_path: Path,
        output_path: Path,
        *,
        output_format: OutputFormat,
        encoding: str,
) -> int:
    """Parse every line of `input_path` and write the rendered export to `output_path`.

    Returns:
        The number of identifiers read.
    """

    cert_ids = read_cert_ids(input_path)
    write_output(output_path, _RENDERERS[output_format](cert_ids), encoding=encoding)
    return len(cert_ids)


def build_arg_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uvci-graph",
        description="Parse EU Digital COVID Certificate UVCIs from a file and export them.",
    )
    parser.add_argument("input", type=Path, help="Name of Covid UVCI input file.")
    parser.add_argument("output", type=Path, help="Name of export output file.")
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=sorted(_RENDERERS),
        default=settings.output_format,
        help="Export format (default: %(default)s).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point; returns the process exit status."""

    try:
        settings = load_settings()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1
    configure_logging(settings.log_level)

    args = build_arg_parser(settings).parse_args(argv)

    try:
        count = export(
            args.input,
            args.output,
            output_format=args.output_format,
            encoding=settings.output_encoding,
        )
    except ExportError as exc:
        logger.error("export failed reason=%s", exc)
        return 1

    logger.info("exported count=%d format=%s path=%s", count, args.output_format, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
