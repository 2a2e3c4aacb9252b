"""Flatten encoder for the standalone configuration protocol.

WHY: A standalone fabric has no addressing and no chains: the loader
simply takes the whole bitstream as one vector.

HOW: Writes every bit value, in source order, with no delimiter of any
kind. The result is one unbroken digit string.

RULES:
- Source order, no spaces, no per-bit newline
- No line terminator of its own; the writer appends the final one
"""

from __future__ import annotations

from typing import TextIO

from fabric_bitstream.core.ir import FabricBitstream
from fabric_bitstream.encoders.base import STATUS_OK, BaseEncoder, format_bits


class FlattenEncoder(BaseEncoder):
    """Standalone protocol: ``1011...`` on a single line."""

    @property
    def name(self) -> str:
        return "Standalone"

    def encode(self, bitstream: FabricBitstream, stream: TextIO) -> int:
        stream.write(format_bits(bit.value for bit in bitstream.bits))
        return STATUS_OK
