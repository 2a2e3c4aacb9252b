"""Unit tests for the IR dataclasses.

WHY: Every encoder trusts the IR's bookkeeping: region counts and the
fixed address width per field. A silent mismatch here would produce a
file the hardware loader misreads.

HOW: Tests cover ProtocolKind coercion, region counting and the width
and range assertions in FabricBitstream.add_bit().
"""

import pytest

from fabric_bitstream.core.ir import ConfigBit, FabricBitstream, ProtocolKind


class TestProtocolKind:
    """ProtocolKind.coerce maps members and keys, rejects everything else."""

    def test_member_passes_through(self):
        assert ProtocolKind.coerce(ProtocolKind.SCAN_CHAIN) is ProtocolKind.SCAN_CHAIN

    def test_key_is_case_and_space_insensitive(self):
        assert ProtocolKind.coerce(" Memory_Bank ") is ProtocolKind.MEMORY_BANK

    def test_unknown_key(self):
        assert ProtocolKind.coerce("jtag") is None

    def test_non_string(self):
        assert ProtocolKind.coerce(3) is None
        assert ProtocolKind.coerce(None) is None


class TestFabricBitstream:
    """Region counting and address width assertions."""

    def test_empty_has_one_region(self):
        bitstream = FabricBitstream()
        assert bitstream.num_regions == 1
        assert bitstream.num_bits == 0

    def test_regions_derived_from_highest_index(self):
        bitstream = FabricBitstream(bits=[ConfigBit(value=True, region=2)])
        assert bitstream.num_regions == 3

    def test_declared_regions_win(self):
        bitstream = FabricBitstream(bits=[ConfigBit(value=True)], regions=4)
        assert bitstream.num_regions == 4

    def test_region_out_of_declared_range(self):
        with pytest.raises(ValueError, match="out of range"):
            FabricBitstream(bits=[ConfigBit(value=True, region=2)], regions=2)

    def test_negative_region(self):
        bitstream = FabricBitstream()
        with pytest.raises(ValueError, match="non-negative"):
            bitstream.add_bit(ConfigBit(value=True, region=-1))

    def test_address_width_recorded(self):
        bitstream = FabricBitstream(bits=[ConfigBit(value=True, bl="001", wl="10")])
        assert bitstream.address_widths == {"bl": 3, "wl": 2}

    def test_address_width_mismatch(self):
        bitstream = FabricBitstream(bits=[ConfigBit(value=True, address="101")])
        with pytest.raises(ValueError, match="expected 3"):
            bitstream.add_bit(ConfigBit(value=False, address="10"))
        assert bitstream.num_bits == 1

    def test_widths_are_per_field(self):
        bitstream = FabricBitstream()
        bitstream.add_bit(ConfigBit(value=True, bl="0001", wl="1"))
        bitstream.add_bit(ConfigBit(value=True, bl="0010", wl="0"))
        assert bitstream.num_bits == 2
