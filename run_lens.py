"""
Main execution script for the DiaLens hypoglycaemia lens.
Run this file to enhance ePI HTML files.
"""

import argparse
import logging
from pathlib import Path
import sys

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent))

from dialens.config import Config, setup_logging
from dialens.exceptions import LensError
from dialens.pipeline import HypoLens
from dialens.utils import load_json, load_text, save_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="DiaLens - Hypoglycaemia risk lens for insulin ePIs"
    )

    parser.add_argument(
        "--epi",
        type=str,
        help="Path to ePI bundle JSON file"
    )

    parser.add_argument(
        "--html",
        type=str,
        help="Path to rendered ePI HTML file"
    )

    parser.add_argument(
        "--batch",
        type=str,
        help="Directory containing <name>.json + <name>.html pairs"
    )

    parser.add_argument(
        "--output",
        type=str,
        help="Output file (single mode) or directory (batch mode)"
    )

    parser.add_argument(
        "--spec",
        action="store_true",
        help="Print the lens specification version and exit"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else Config.LOG_LEVEL)

    lens = HypoLens(Config)

    if args.spec:
        print(lens.get_specification())
        return 0

    try:
        if args.epi and args.html:
            document = load_json(args.epi)
            html = load_text(args.html)
            if document is None or html is None:
                return 1

            result = lens.apply(document, html)

            if args.output:
                save_text(result.html, args.output)
                logger.info(f"Saved enhanced HTML to: {args.output}")
            else:
                print(result.html)

            logger.info(f"Status: {result.status.value}")
            return 0

        if args.batch:
            results = lens.process_batch(args.batch, args.output)
            failed = sum(1 for r in results if r.get("status") == "failed")

            print("\n" + "=" * 70)
            print("BATCH PROCESSING COMPLETE")
            print("=" * 70)
            print(f"Total ePIs: {len(results)}")
            print(f"Failed: {failed}")
            print("=" * 70)
            return 0

        parser.print_help()
        return 1

    except LensError as e:
        logger.error(f"Execution failed: {str(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
