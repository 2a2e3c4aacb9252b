"""Intermediate representation dataclasses for fabric bitstreams.

WHY: Upstream bitstream generation resolves every configuration bit of
the fabric to a value and, depending on the configuration protocol, to
an address (frame-based), a BL/WL address pair (memory bank) or a scan
chain region. Encoders for the different text formats each need the
same bits, grouped differently. The IR provides one well-typed form
that every encoder consumes, decoupling loading from encoding.

HOW: Three types form the model:
  ProtocolKind     — closed set of configuration protocols
  ConfigBit        — one configuration bit with its address annotations
  FabricBitstream  — the ordered bit sequence plus region count

RULES:
- ConfigBit is the atomic unit — every encoder works with these
- Bit order in FabricBitstream.bits is the source order; never re-sorted
- Address strings are '0'/'1' characters, MSB first
- All addresses of one field (address, bl, wl) share one width per
  bitstream; add_bit() raises ValueError on a mismatch
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ProtocolKind(str, Enum):
    """Configuration protocols, one per output text format.

    RULES:
    - Values are the snake_case keys used by the CLI, JSON documents and
      the encoder registry
    """

    STANDALONE = "standalone"
    SCAN_CHAIN = "scan_chain"
    MEMORY_BANK = "memory_bank"
    FRAME_BASED = "frame_based"

    @classmethod
    def coerce(cls, value: object) -> ProtocolKind | None:
        """Return the ProtocolKind for a member or key, or None if unrecognized."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


@dataclass(frozen=True)
class ConfigBit:
    """A single configuration bit with its protocol-specific annotations.

    RULES:
    - value: the bit to load into the configuration memory
    - region: scan chain index (0-based); only meaningful for scan chains
    - address: frame address; frame-based protocol only
    - bl / wl: bit-line and word-line addresses; memory bank only
    """

    value: bool
    region: int = 0
    address: str | None = None
    bl: str | None = None
    wl: str | None = None


@dataclass
class FabricBitstream:
    """The complete, ordered set of configuration bits for one fabric.

    WHY: This is the top-level container encoders receive. It owns the
    bit order and the address width bookkeeping so that every encoder
    can assume consistent input.

    HOW: Build it empty and call add_bit() in source order, or pass
    ``bits`` directly (widths are checked in __post_init__ either way).

    RULES:
    - bits: source order, which every encoder preserves
    - num_regions: number of scan chains; when not given it is one more
      than the highest region index used (minimum 1)
    - address_widths: width recorded per address field on first use
    """

    bits: list[ConfigBit] = field(default_factory=list)
    regions: int | None = None
    address_widths: dict[str, int] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        bits = list(self.bits)
        self.bits = []
        for bit in bits:
            self.add_bit(bit)

    @property
    def num_regions(self) -> int:
        if self.regions is not None:
            return self.regions
        if not self.bits:
            return 1
        return max(bit.region for bit in self.bits) + 1

    @property
    def num_bits(self) -> int:
        return len(self.bits)

    def add_bit(self, bit: ConfigBit) -> ConfigBit:
        """Append a bit, asserting region range and address widths."""
        if bit.region < 0:
            raise ValueError("Region index must be non-negative, got {}".format(bit.region))
        if self.regions is not None and bit.region >= self.regions:
            raise ValueError(
                "Region index {} out of range for {} region(s)".format(bit.region, self.regions)
            )
        for name in ("address", "bl", "wl"):
            addr = getattr(bit, name)
            if addr is None:
                continue
            width = self.address_widths.setdefault(name, len(addr))
            if len(addr) != width:
                raise ValueError(
                    "Bit {} has {} '{}' of width {}, expected {}".format(
                        len(self.bits), name, addr, len(addr), width,
                    )
                )
        self.bits.append(bit)
        return bit
