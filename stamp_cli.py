#!/usr/bin/env python3
"""
QR Stamp CLI - Generate page QR codes for a document set

Fingerprints the input file(s) and writes one QR code per page:
    <output-dir>/<prefix>-<set_id>-<page>.png

Defaults come from QRSTAMP_* environment variables (see qrstamp.config);
flags override them.

Examples:
    python stamp_cli.py exam.pdf --set-id 7 --pages 4
    python stamp_cli.py part1.pdf part2.pdf --pages 2 --atomic
"""

import sys
import logging
import argparse
from typing import List, Optional

from qrstamp import __version__
from qrstamp.config import StampConfig
from qrstamp.errors import QRStampError
from qrstamp.ingestion import read_contents
from qrstamp.metadata import Metadata
from qrstamp.orchestration import Orchestrator
from qrstamp.rendering import QRCodeEncoder, PNGImageWriter
from qrstamp.staging import StagedOutput

logger = logging.getLogger("qrstamp.cli")


def build_parser(config: StampConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Stamp each page of a document set with a fingerprint QR code',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument('inputs', nargs='+', help='Input file(s); order is part of the fingerprint')
    parser.add_argument('--set-id', type=int, default=config.set_id, help='Set (exam) id, 0-255')
    parser.add_argument('--pages', type=int, default=config.pages, help='Number of pages in the set, 1-255')
    parser.add_argument('--output-dir', default=config.output_dir, help='Directory for PNG output')
    parser.add_argument('--prefix', default=config.name_prefix, help='Output file name prefix')
    parser.add_argument('--atomic', action='store_true', help='Publish all pages or none')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def run(args: argparse.Namespace, config: StampConfig) -> int:
    contents = read_contents(args.inputs)
    terminal = Metadata(args.set_id, args.pages)
    encoder = QRCodeEncoder(box_size=config.box_size, border=config.border)

    if args.atomic:
        with StagedOutput(args.output_dir) as staged:
            Orchestrator(encoder, staged.writer).emit_set(contents, terminal, args.prefix)
        written = staged.published
    else:
        written = Orchestrator(encoder, PNGImageWriter(args.output_dir)).emit_set(contents, terminal, args.prefix)

    print(f"Wrote {len(written)} QR code(s) to {args.output_dir}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    try:
        config = StampConfig.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    args = build_parser(config).parse_args(argv)

    try:
        return run(args, config)
    except (QRStampError, ValueError) as e:
        logger.error("%s: %s", type(e).__name__, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
