"""Address-keyed encoders for the memory bank and frame-based protocols.

WHY: Addressed protocols write one data word per address. Several
configuration bits may share an address (a multi-bit word), so bits
are collected per address before anything is written. Memory banks
use a bit-line/word-line address pair; frames use a single address.
Everything but the key shape is the same, so it lives in one base.

HOW: Subclasses return an ordered mapping of key tuple to data vector
from the grouping module. The base writes one line per key:
the key components separated by single spaces, a space, then the data
vector as one digit string.

RULES:
- Groups are emitted in first-encountered order, never sorted
- Data vector order is source order within the group
- Memory bank keys are (BL, WL): BL is written first
- A bit without the address its protocol needs is logged and the
  encoder returns STATUS_ERROR before writing anything
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Dict, List, TextIO, Tuple

from fabric_bitstream.core.grouping import (
    MissingAddressError,
    build_frame_based_bitstream_by_address,
    build_memory_bank_bitstream_by_address,
)
from fabric_bitstream.core.ir import FabricBitstream
from fabric_bitstream.encoders.base import (
    STATUS_ERROR,
    STATUS_OK,
    BaseEncoder,
    format_bits,
    write_line,
    write_space,
)

logger = logging.getLogger(__name__)

AddressKey = Tuple[str, ...]


def write_address_line(stream: TextIO, key: AddressKey, values: List[bool]) -> None:
    """Write ``<key[0]> <key[1]> ... <din>`` and a line terminator."""
    for addr in key:
        stream.write(addr)
        write_space(stream)
    write_line(stream, format_bits(values))


class AddressKeyedEncoder(BaseEncoder):
    """Shared grouping-then-emission logic for addressed protocols."""

    @abstractmethod
    def group(self, bitstream: FabricBitstream) -> Dict[AddressKey, List[bool]]:
        """Ordered mapping of address key to data vector.

        Raises:
            MissingAddressError: a bit lacks a required address field.
        """

    def encode(self, bitstream: FabricBitstream, stream: TextIO) -> int:
        try:
            groups = self.group(bitstream)
        except MissingAddressError as e:
            logger.error("Cannot write %s bitstream: %s", self.name.lower(), e)
            return STATUS_ERROR

        logger.debug("Writing %d address group(s) for %d bit(s)", len(groups), bitstream.num_bits)
        for key, values in groups.items():
            write_address_line(stream, key, values)
        return STATUS_OK


class MemoryBankEncoder(AddressKeyedEncoder):
    """Memory bank protocol: ``<BL> <WL> <din...>`` per address pair."""

    @property
    def name(self) -> str:
        return "Memory bank"

    def group(self, bitstream: FabricBitstream) -> Dict[AddressKey, List[bool]]:
        return build_memory_bank_bitstream_by_address(bitstream)


class FrameBasedEncoder(AddressKeyedEncoder):
    """Frame-based protocol: ``<addr> <din...>`` per frame address."""

    @property
    def name(self) -> str:
        return "Frame-based"

    def group(self, bitstream: FabricBitstream) -> Dict[AddressKey, List[bool]]:
        return {
            (address,): values
            for address, values in build_frame_based_bitstream_by_address(bitstream).items()
        }
