"""Unit tests for region and address grouping.

WHY: Grouping decides which bit lands on which line. Reordering, a
dropped bit or padding at the wrong end corrupts the configuration.

HOW: Tests build small bitstreams and check region partition, padding,
and first-encountered order of address groups.
"""

import pytest

from fabric_bitstream.core.grouping import (
    MissingAddressError,
    build_config_chain_bitstream_by_region,
    build_frame_based_bitstream_by_address,
    build_memory_bank_bitstream_by_address,
    build_regions,
    find_regional_bitstream_max_size,
    pad_regions,
)
from fabric_bitstream.core.ir import ConfigBit, FabricBitstream


class TestRegions:
    """Region partition, max size and tail padding."""

    def test_partition_keeps_source_order(self, scan_chain_bitstream):
        assert build_regions(scan_chain_bitstream) == [[True, False, True], [False, True]]

    def test_max_size(self, scan_chain_bitstream):
        assert find_regional_bitstream_max_size(build_regions(scan_chain_bitstream)) == 3

    def test_max_size_of_nothing(self):
        assert find_regional_bitstream_max_size([]) == 0

    def test_pad_at_tail_with_filler(self):
        assert pad_regions([[True], [True, True, False]], filler_bit=True) == [
            [True, True, True],
            [True, True, False],
        ]

    def test_pad_does_not_mutate_input(self):
        regions = [[True], [False, False]]
        pad_regions(regions)
        assert regions == [[True], [False, False]]

    def test_declared_empty_region_is_all_filler(self):
        bitstream = FabricBitstream(bits=[ConfigBit(value=True), ConfigBit(value=True)], regions=2)
        assert build_config_chain_bitstream_by_region(bitstream) == [
            [True, True],
            [False, False],
        ]

    def test_no_bit_dropped(self, scan_chain_bitstream):
        regions = build_regions(scan_chain_bitstream)
        assert sum(len(region) for region in regions) == scan_chain_bitstream.num_bits


class TestAddressGroups:
    """Address grouping in first-encountered order."""

    def test_memory_bank_groups(self, memory_bank_bitstream):
        groups = build_memory_bank_bitstream_by_address(memory_bank_bitstream)
        assert list(groups.items()) == [
            (("01", "10"), [True, False]),
            (("11", "00"), [True]),
        ]

    def test_frame_groups_not_sorted(self):
        bitstream = FabricBitstream(bits=[
            ConfigBit(value=True, address="11"),
            ConfigBit(value=False, address="00"),
            ConfigBit(value=False, address="11"),
        ])
        groups = build_frame_based_bitstream_by_address(bitstream)
        assert list(groups) == ["11", "00"]
        assert groups["11"] == [True, False]

    def test_missing_frame_address(self, standalone_bitstream):
        with pytest.raises(MissingAddressError) as exc_info:
            build_frame_based_bitstream_by_address(standalone_bitstream)
        assert exc_info.value.index == 0
        assert exc_info.value.field_name == "address"

    def test_missing_word_line(self):
        bitstream = FabricBitstream(bits=[ConfigBit(value=True, bl="01")])
        with pytest.raises(MissingAddressError, match="'wl'"):
            build_memory_bank_bitstream_by_address(bitstream)
