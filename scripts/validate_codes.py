"""
Validate unified social credit codes from the command line.

Usage:
    # Validate codes given as arguments
    python scripts/validate_codes.py 91320213586657279T 91350211MA2WPM7X0U

    # Validate one code per line from a file
    python scripts/validate_codes.py --file codes.txt

    # Use a custom configuration
    python scripts/validate_codes.py --config my_config.yaml 91320213586657279T
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from uscc import USCCValidator  # noqa: E402
from uscc.logging_config import setup_logging  # noqa: E402

logger = logging.getLogger(__name__)


def read_codes(path: Path) -> list:
    """Read one code per line, skipping blank lines."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.rstrip("\r\n") for line in f if line.strip()]


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Validate unified social credit codes",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("codes", nargs="*", help="Codes to validate")
    parser.add_argument(
        "--file", type=str, default=None, help="File with one code per line"
    )
    parser.add_argument(
        "--config", type=str, default=None, help="Path to validator config YAML"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log rejection details"
    )

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    codes = list(args.codes)
    if args.file:
        try:
            codes.extend(read_codes(Path(args.file)))
        except FileNotFoundError as e:
            logger.error(f"Input file not found: {e}")
            raise SystemExit(1) from e

    if not codes:
        parser.error("no codes given")

    validator = USCCValidator(Path(args.config) if args.config else None)
    results = validator.validate_batch(codes)

    for result in results:
        if result.is_pass():
            print(f"{result.raw_input}\tVALID")
        else:
            reason = result.rejection_reason
            print(f"{result.raw_input}\tINVALID\t{reason.code}\t{reason.message}")

    sys.exit(0 if all(result.is_pass() for result in results) else 1)


if __name__ == "__main__":
    main()
