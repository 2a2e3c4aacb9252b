"""Region and address grouping of a FabricBitstream.

WHY: The scan chain and addressed protocols do not load bits in flat
source order. Scan chains shift all regions in lock-step, so the text
file is laid out by chain depth. Memory banks and frames write one data
word per address, so bits sharing an address must be collected into a
single data vector. These groupings are format-agnostic and live here,
not in the encoders.

HOW: Every builder makes a single pass over ``bitstream.bits`` and
collects into a list (regions) or a plain dict (address groups). Python
dicts preserve insertion order, so iteration order is first-encountered
order — nothing is ever sorted.

RULES:
- Order within a region or an address group is source order
- No bit is dropped or duplicated
- Padding goes at the tail of a region, using an explicit filler bit
- Builders return fresh structures per call; the bitstream is not mutated
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from fabric_bitstream.core.ir import ConfigBit, FabricBitstream

BitAddress = str
BitLineWordLineAddress = Tuple[str, str]


class MissingAddressError(ValueError):
    """A bit lacks the address field required by the protocol."""

    def __init__(self, index: int, field_name: str) -> None:
        self.index = index
        self.field_name = field_name
        super().__init__("Bit {} has no '{}' address".format(index, field_name))


def build_regions(bitstream: FabricBitstream) -> List[List[bool]]:
    """Partition bit values into their scan chain regions.

    Regions are indexed 0..num_regions-1; a region without bits is an
    empty list.
    """
    regions: List[List[bool]] = [[] for _ in range(bitstream.num_regions)]
    for bit in bitstream.bits:
        regions[bit.region].append(bit.value)
    return regions


def find_regional_bitstream_max_size(regions: List[List[bool]]) -> int:
    """Length of the longest region, 0 when there are none."""
    return max((len(region) for region in regions), default=0)


def pad_regions(regions: List[List[bool]], filler_bit: bool = False) -> List[List[bool]]:
    """Pad every region at the tail with ``filler_bit`` to the longest length.

    WHY: All chains are clocked together, so every clock step needs a
    defined value on every chain — including chains that already ran
    out of real bits.

    Returns new lists; the input regions are left untouched.
    """
    max_size = find_regional_bitstream_max_size(regions)
    return [list(region) + [filler_bit] * (max_size - len(region)) for region in regions]


def build_config_chain_bitstream_by_region(
    bitstream: FabricBitstream,
    filler_bit: bool = False,
) -> List[List[bool]]:
    """Regions of the bitstream, padded to equal length."""
    return pad_regions(build_regions(bitstream), filler_bit)


def _bit_address(index: int, bit: ConfigBit) -> BitAddress:
    if bit.address is None:
        raise MissingAddressError(index, "address")
    return bit.address


def _bit_bl_wl_address(index: int, bit: ConfigBit) -> BitLineWordLineAddress:
    if bit.bl is None:
        raise MissingAddressError(index, "bl")
    if bit.wl is None:
        raise MissingAddressError(index, "wl")
    return (bit.bl, bit.wl)


def build_frame_based_bitstream_by_address(
    bitstream: FabricBitstream,
) -> Dict[BitAddress, List[bool]]:
    """Group bit values by frame address, in first-encountered order.

    Raises:
        MissingAddressError: a bit has no ``address``.
    """
    groups: Dict[BitAddress, List[bool]] = {}
    for index, bit in enumerate(bitstream.bits):
        groups.setdefault(_bit_address(index, bit), []).append(bit.value)
    return groups


def build_memory_bank_bitstream_by_address(
    bitstream: FabricBitstream,
) -> Dict[BitLineWordLineAddress, List[bool]]:
    """Group bit values by (BL, WL) address pair, in first-encountered order.

    Raises:
        MissingAddressError: a bit has no ``bl`` or no ``wl``.
    """
    groups: Dict[BitLineWordLineAddress, List[bool]] = {}
    for index, bit in enumerate(bitstream.bits):
        groups.setdefault(_bit_bl_wl_address(index, bit), []).append(bit.value)
    return groups
