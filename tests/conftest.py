"""Shared test fixtures for the fabric_bitstream test suite.

WHY: Every encoder, the writer and the CLI are checked against the same
small bitstreams, one per protocol. Centralizing them here keeps the
expected text files in one place.

HOW: Pytest fixtures build FabricBitstream IR objects directly; the
bitstream_document fixture writes an equivalent JSON bit source.

RULES:
- Fixture contents match the reference examples for each format:
  standalone [1,0,1,1]; scan chain A=[1,0,1], B=[0,1]; memory bank
  two bits at (01, 10); frame one bit at 101
"""

import json
from typing import Any, Dict

import pytest

from fabric_bitstream.core.ir import ConfigBit, FabricBitstream


@pytest.fixture
def standalone_bitstream():
    """Four bits 1, 0, 1, 1 with no addressing."""
    return FabricBitstream(bits=[ConfigBit(value=v) for v in (True, False, True, True)])


@pytest.fixture
def scan_chain_bitstream():
    """Two regions, A=[1,0,1] and B=[0,1], interleaved in source order."""
    return FabricBitstream(bits=[
        ConfigBit(value=True, region=0),
        ConfigBit(value=False, region=1),
        ConfigBit(value=False, region=0),
        ConfigBit(value=True, region=1),
        ConfigBit(value=True, region=0),
    ])


@pytest.fixture
def memory_bank_bitstream():
    """Two bits sharing BL=01, WL=10 (values 1 then 0) and one at BL=11, WL=00."""
    return FabricBitstream(bits=[
        ConfigBit(value=True, bl="01", wl="10"),
        ConfigBit(value=True, bl="11", wl="00"),
        ConfigBit(value=False, bl="01", wl="10"),
    ])


@pytest.fixture
def frame_bitstream():
    """One bit at frame address 101."""
    return FabricBitstream(bits=[ConfigBit(value=True, address="101")])


BITSTREAM_DOCUMENT: Dict[str, Any] = {
    "protocol": "memory_bank",
    "bits": [
        {"value": 1, "bl": "01", "wl": "10"},
        {"value": True, "bl": "11", "wl": "00"},
        {"value": 0, "bl": "01", "wl": "10"},
    ],
}


@pytest.fixture
def bitstream_document(tmp_path):
    """Path to a memory bank bit-source JSON file."""
    path = tmp_path / "bits.json"
    path.write_text(json.dumps(BITSTREAM_DOCUMENT), encoding="utf-8")
    return path
