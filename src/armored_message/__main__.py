"""
CLI entry point for the armored message decoder.

Usage:
    python -m armored_message tests/fixtures/contract
    python -m armored_message tests/fixtures/contract --output out/contract.json
    python -m armored_message tests/fixtures/contract --scan --verbose
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import settings
from .exceptions import ArmorError
from .pipeline import MessagePipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="armored_message",
        description="Decode an armored, signed message into JSON.",
    )
    parser.add_argument("input", type=Path, help="Armored document to decode")
    parser.add_argument("--output", "-o", type=Path, help="Save the message as JSON here")
    parser.add_argument("--overwrite", action="store_true", help="Replace an existing output file")
    parser.add_argument(
        "--scan",
        action="store_true",
        help="Locate the armor separators instead of stripping a fixed envelope",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each pipeline step")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = settings.decoder
    if args.scan:
        config = config.model_copy(update={'envelope_mode': 'scan'})

    try:
        message = MessagePipeline(config).decode_file(args.input)
        if args.output:
            output_path = message.save_to_json(args.output, overwrite=args.overwrite)
            logger.info("Saved message to: %s", output_path)
        else:
            print(json.dumps(message.model_dump(mode='json'), indent=2, ensure_ascii=False))
    except (ArmorError, OSError) as exc:
        logger.error("Failed to decode %s: %s", args.input, exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
