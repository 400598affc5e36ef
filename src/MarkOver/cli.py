from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from . import config, document_html
from .constants import VIEW_MODES
from .model import MarkOverOptions
from .sample import SAMPLE_CONTENT
from .utils import configure_logging, read_source, resolve_output_path, write_html


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markover",
        description="Convert MarkOver (.mo) documents into HTML.",
    )
    parser.add_argument("input", type=str, nargs="?", help="Path to MarkOver file")
    parser.add_argument("-o", "--output", type=str, help="Output HTML path")
    parser.add_argument("--mode", choices=VIEW_MODES, help="web (continuous) or paged (printable pages)")
    parser.add_argument("--zoom", type=int, help="Zoom percentage")
    parser.add_argument("--page-height", type=int, help="Page height in px for paged mode")
    parser.add_argument("--config", type=str, help="YAML file with render options")
    parser.add_argument("--escape-classes", action="store_true", help="HTML-escape angle block class lists")
    parser.add_argument("--sample", action="store_true", help="Render the built-in sample document")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def build_options(args: argparse.Namespace) -> MarkOverOptions:
    options = MarkOverOptions()
    if args.config:
        options = config.load_options(Path(args.config).expanduser(), base=options)
    overrides = {}
    if args.mode is not None:
        overrides["mode"] = args.mode
    if args.zoom is not None:
        overrides["zoom"] = args.zoom
    if args.page_height is not None:
        overrides["page_height"] = args.page_height
    if args.escape_classes:
        overrides["escape_classes"] = True
    return config.validate_options(replace(options, **overrides))


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)
    if not args.input and not args.sample:
        parser.error("an input file is required unless --sample is given")

    options = build_options(args)
    if args.sample:
        source = SAMPLE_CONTENT
        output_path = Path(args.output) if args.output else Path("sample.html")
        title = "MarkOver sample"
    else:
        input_path = Path(args.input).expanduser()
        if not input_path.exists():
            raise FileNotFoundError(f"Input file not found: {input_path}")
        output_path = resolve_output_path(input_path, args.output)
        title = input_path.stem
        logging.info("Reading %s", input_path)
        source = read_source(input_path)
    logging.debug("Source length: %d chars", len(source))

    logging.info("Rendering %s view...", options.mode)
    html, _ = document_html.build_document(source, options=options, title=title)

    write_html(output_path, html)
    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
