"""Fabric Bitstream Writer — plain-text bitstream output for FPGA fabrics.

WHY: Hardware-loading tools (testbenches, programmers) consume fabric
bitstreams as plain 0|1 text, but the layout of that text depends on how
configuration bits physically reach the fabric: a flat vector, parallel
scan chains, a BL/WL-addressed memory bank or addressed frames. This
package turns one protocol-agnostic bitstream into the exact text file
each protocol expects.

HOW: Three-stage pipeline — load (JSON bit source into the IR), group
(regions or address groups), encode (one pluggable encoder per protocol).
Each stage is independently testable.

RULES:
- All encoders consume the same FabricBitstream IR
- Output is byte-exact: no headers, comments or metadata lines
- The IR is the stable contract between loading and encoding
"""

__version__ = "0.1.0"
