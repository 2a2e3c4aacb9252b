"""Command-line interface for the fabric bitstream writer.

WHY: Users and build scripts need a simple way to turn a bit-source
document into the plain text file a testbench or programmer loads.

HOW: argparse accepts the input document, the output file and the
protocol options. The document is loaded into the IR, then handed to
write_fabric_bitstream_to_text_file(). Errors go to stderr.

RULES:
- Positional argument: input bit-source JSON file
- -o/--output is required
- Protocol: --protocol, else the document's "protocol", else
  FABRIC_BITSTREAM_PROTOCOL (default "standalone")
- --filler-bit overrides FABRIC_BITSTREAM_FILLER_BIT for scan chains
- -v/--verbose reports the bit count and lowers the log level to DEBUG
- Exit status equals the writer status; unreadable input exits 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from fabric_bitstream.config import (
    DEFAULT_PROTOCOL,
    DEFAULT_VERBOSE,
    LOG_FORMAT,
    LOG_LEVEL,
    parse_filler_bit,
)
from fabric_bitstream.core.loader import BitstreamLoadError, load_bitstream
from fabric_bitstream.encoders import ENCODERS
from fabric_bitstream.writer import write_fabric_bitstream_to_text_file


def _error(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separate from main() so tests can inspect the parser.
    """
    parser = argparse.ArgumentParser(
        prog="fabric_bitstream",
        description="Write a fabric bitstream to the plain text format "
                    "of its configuration protocol.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the bit-source JSON document.",
    )

    parser.add_argument(
        "-o", "--output",
        required=True,
        help="Path of the plain text bitstream file to write (truncated).",
    )

    parser.add_argument(
        "--protocol",
        default=None,
        help="Configuration protocol. Available: {}. Default: the document's "
             "protocol, then {}.".format(", ".join(ENCODERS), DEFAULT_PROTOCOL),
    )

    parser.add_argument(
        "--filler-bit",
        choices=["0", "1"],
        default=None,
        help="Bit used to pad shorter scan chain regions (default: 0).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=DEFAULT_VERBOSE,
        help="Report the number of bits written and enable debug logging.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Returns the process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format=LOG_FORMAT,
    )

    try:
        loaded = load_bitstream(args.input_file)
    except BitstreamLoadError as e:
        _error(str(e))
        return 1

    protocol = args.protocol or loaded.protocol or DEFAULT_PROTOCOL
    filler_bit = parse_filler_bit(args.filler_bit) if args.filler_bit is not None else None

    return write_fabric_bitstream_to_text_file(
        loaded.bitstream,
        protocol,
        args.output,
        verbose=args.verbose,
        filler_bit=filler_bit,
    )


if __name__ == "__main__":
    sys.exit(main())
