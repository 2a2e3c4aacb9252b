"""Configuration defaults and .env loading.

WHY: Centralizes the few configurable values (default protocol, scan
chain filler bit, verbosity, log level) so they are easy to find and
override per machine without touching code.

HOW: python-dotenv loads the .env file on import. Defaults are
module-level strings read with os.getenv. parse_filler_bit() turns
the string form of a filler bit into a bool with a clear error.

RULES:
- All defaults can be overridden via FABRIC_BITSTREAM_* variables
- DEFAULT_PROTOCOL is a ProtocolKind key; it is validated where used
- The filler bit is '0' or '1'; anything else is a ValueError
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

DEFAULT_PROTOCOL = os.getenv("FABRIC_BITSTREAM_PROTOCOL", "standalone")
DEFAULT_FILLER_BIT = os.getenv("FABRIC_BITSTREAM_FILLER_BIT", "0")
DEFAULT_VERBOSE = os.getenv("FABRIC_BITSTREAM_VERBOSE", "false").lower() == "true"
LOG_LEVEL = os.getenv("FABRIC_BITSTREAM_LOG_LEVEL", "WARNING").upper()

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def parse_filler_bit(value: str | bool | int) -> bool:
    """Convert a filler bit setting to a bool.

    RULES:
    - Accepts "0"/"1" (surrounding whitespace ignored), 0/1 and bools
    - Raises ValueError for anything else
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip()
    if text not in ("0", "1"):
        raise ValueError(
            "Invalid filler bit '{}'. Use 0 or 1 "
            "(FABRIC_BITSTREAM_FILLER_BIT in the .env file).".format(value)
        )
    return text == "1"
