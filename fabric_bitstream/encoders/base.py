"""Abstract base encoder and text emission helpers.

WHY: Every protocol consumes the same FabricBitstream IR but lays the
bits out differently on disk. This base class enforces one interface so
the writer can route to any encoder generically.

HOW: BaseEncoder is an ABC with two requirements: a ``name`` property
and an ``encode()`` method that writes into any writable text stream
and returns a status code. The module-level helpers are small pure
functions over such a stream; encoders never touch files directly.

RULES:
- ``encode()`` returns 0 on success, 1 on a reported failure
- Encoders log their own failures and never raise for control flow
- Bit values are written as '0'/'1' characters, never packed
- No headers, comments or metadata lines, ever
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, TextIO

from fabric_bitstream.core.ir import FabricBitstream

STATUS_OK = 0
STATUS_ERROR = 1


def format_bit(value: bool) -> str:
    """The textual digit of a bit value."""
    return "1" if value else "0"


def format_bits(values: Iterable[bool]) -> str:
    """Bit values as one digit string with no separators."""
    return "".join(format_bit(value) for value in values)


def write_space(stream: TextIO) -> None:
    """Write the single space separating address fields and data."""
    stream.write(" ")


def write_line(stream: TextIO, text: str = "") -> None:
    """Write ``text`` followed by a single ``\\n`` line terminator."""
    stream.write(text)
    stream.write("\n")


class BaseEncoder(ABC):
    """Abstract base for all protocol encoders.

    To add a new protocol:
    1. Create a new file in encoders/
    2. Subclass BaseEncoder
    3. Implement encode() and name
    4. Register in ENCODERS dict in encoders/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable protocol name, e.g. 'Memory bank'."""

    @abstractmethod
    def encode(self, bitstream: FabricBitstream, stream: TextIO) -> int:
        """Write the structured content for ``bitstream`` into ``stream``.

        Args:
            bitstream: The fully populated fabric bitstream. Read-only.
            stream: Any writable text stream (file, io.StringIO).

        Returns:
            STATUS_OK on success, STATUS_ERROR on a reported failure.
        """
