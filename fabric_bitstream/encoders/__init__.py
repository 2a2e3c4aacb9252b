"""Protocol encoder registry.

WHY: The writer and the CLI need a single lookup to find the encoder
for a configuration protocol. A central dict keeps the set of
supported protocols closed and explicit.

HOW: ENCODERS maps ProtocolKind keys to encoder *classes* (not
instances). Callers instantiate as needed:
``encoder = ENCODERS["memory_bank"]()``.

RULES:
- Keys are the ProtocolKind values (snake_case)
- Every ProtocolKind has exactly one entry
- A key missing from ENCODERS is an invalid protocol, never a fallback
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fabric_bitstream.core.ir import ProtocolKind
from fabric_bitstream.encoders.address_keyed import FrameBasedEncoder, MemoryBankEncoder
from fabric_bitstream.encoders.flatten import FlattenEncoder
from fabric_bitstream.encoders.scan_chain import ScanChainEncoder

if TYPE_CHECKING:
    from fabric_bitstream.encoders.base import BaseEncoder

ENCODERS: dict[str, type[BaseEncoder]] = {
    ProtocolKind.STANDALONE.value: FlattenEncoder,
    ProtocolKind.SCAN_CHAIN.value: ScanChainEncoder,
    ProtocolKind.MEMORY_BANK.value: MemoryBankEncoder,
    ProtocolKind.FRAME_BASED.value: FrameBasedEncoder,
}
