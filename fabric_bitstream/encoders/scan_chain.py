"""Chain-region encoder for the scan chain configuration protocol.

WHY: A fabric may be split into several configuration regions, each
with its own scan chain. All chains are clocked together, so at every
clock step one bit enters each chain. The loading testbench reads the
file one line per clock step, one character per chain.

HOW: Regions are built and tail-padded by the grouping module, then
emitted transposed (column-major): line ``i`` holds bit ``i`` of
region 0, region 1, ... region k-1, concatenated.

RULES:
- Line count equals the longest region's length, not the bit count
- Every line has exactly one character per region
- Shorter regions are padded with an explicit filler bit (default 0)
- An empty bitstream emits no lines
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from fabric_bitstream import config
from fabric_bitstream.core.grouping import build_config_chain_bitstream_by_region
from fabric_bitstream.core.ir import FabricBitstream
from fabric_bitstream.encoders.base import STATUS_OK, BaseEncoder, format_bits, write_line

logger = logging.getLogger(__name__)


class ScanChainEncoder(BaseEncoder):
    """Scan chain protocol: one line per chain depth, one char per region.

    Args:
        filler_bit: Value shifted into chains that ran out of real bits.
                    Defaults to ``config.DEFAULT_FILLER_BIT``.
    """

    def __init__(self, filler_bit: Optional[bool] = None) -> None:
        if filler_bit is None:
            filler_bit = config.parse_filler_bit(config.DEFAULT_FILLER_BIT)
        self.filler_bit = filler_bit

    @property
    def name(self) -> str:
        return "Scan chain"

    def encode(self, bitstream: FabricBitstream, stream: TextIO) -> int:
        regions = build_config_chain_bitstream_by_region(bitstream, self.filler_bit)
        depth = len(regions[0]) if regions else 0
        logger.debug(
            "Writing %d region(s) of depth %d with filler bit %s",
            len(regions), depth, format_bits([self.filler_bit]),
        )
        for ibit in range(depth):
            write_line(stream, format_bits(region[ibit] for region in regions))
        return STATUS_OK
