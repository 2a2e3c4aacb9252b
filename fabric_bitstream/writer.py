"""Top-level fabric bitstream text writer.

WHY: This is the single entry point downstream flows call to put a
fabric bitstream on disk. It owns the destination file for exactly one
call and is the only place a protocol is checked, so every encoder may
assume it was routed a valid protocol.

HOW: write_fabric_bitstream_to_stream() is the router: it looks the
protocol up in ENCODERS and runs exactly one encoder over any writable
text stream. write_fabric_bitstream_to_text_file() validates the file
name, opens the file for truncating write, routes, appends the trailing
line terminator and closes the file.

RULES:
- Status codes, not exceptions: 0 on success, 1 on any failure
- An unrecognized protocol is logged and returns 1; no encoder runs
- An empty file name is a hard precondition failure: nothing is created
- A file that cannot be opened means nothing is written
- A single trailing "\\n" ends the file regardless of protocol or status
- The bitstream is never mutated
"""

from __future__ import annotations

import logging
import os
import time
from typing import Optional, TextIO, Union

from fabric_bitstream.core.ir import FabricBitstream, ProtocolKind
from fabric_bitstream.encoders import ENCODERS
from fabric_bitstream.encoders.base import STATUS_ERROR, BaseEncoder, write_line

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _make_encoder(kind: ProtocolKind, filler_bit: Optional[bool]) -> BaseEncoder:
    encoder_cls = ENCODERS[kind.value]
    if kind is ProtocolKind.SCAN_CHAIN:
        return encoder_cls(filler_bit=filler_bit)
    return encoder_cls()


def write_fabric_bitstream_to_stream(
    bitstream: FabricBitstream,
    protocol: Union[ProtocolKind, str],
    stream: TextIO,
    filler_bit: Optional[bool] = None,
) -> int:
    """Route a bitstream to the encoder for ``protocol``.

    Args:
        bitstream: The fully populated fabric bitstream.
        protocol: A ProtocolKind or its snake_case key.
        stream: Writable text stream receiving the structured content.
        filler_bit: Scan chain padding value; None uses the configured default.

    Returns:
        The encoder's status, or 1 for an unrecognized protocol or an
        invalid encoder setting (e.g. a bad configured filler bit).
    """
    kind = ProtocolKind.coerce(protocol)
    if kind is None or kind.value not in ENCODERS:
        logger.error(
            "Invalid configuration protocol type %r! Available: %s",
            protocol, ", ".join(ENCODERS),
        )
        return STATUS_ERROR

    try:
        encoder = _make_encoder(kind, filler_bit)
    except ValueError as e:
        logger.error("Cannot configure the %s encoder: %s", kind.value, e)
        return STATUS_ERROR
    logger.debug("Encoding %d bit(s) with the %s encoder", bitstream.num_bits, encoder.name)
    return encoder.encode(bitstream, stream)


def write_fabric_bitstream_to_text_file(
    bitstream: FabricBitstream,
    protocol: Union[ProtocolKind, str],
    fname: PathLike,
    verbose: bool = False,
    filler_bit: Optional[bool] = None,
) -> int:
    """Write the loadable fabric bitstream to a plain text file.

    The file holds only 0|1 bitstream content and addresses: the
    loading tools reject anything else.

    Returns:
        0 on success, 1 on an empty file name, an unopenable file,
        an unrecognized protocol or an encoder failure.
    """
    fname = os.fspath(fname)
    if not fname:
        logger.error(
            "Received empty file name to output bitstream! Please specify a valid file name."
        )
        return STATUS_ERROR

    logger.debug(
        "Write %d fabric bitstream into plain text file '%s'", bitstream.num_bits, fname,
    )
    start = time.perf_counter()

    try:
        fp = open(fname, "w", encoding="utf-8", newline="\n")
    except OSError as e:
        logger.error("Failed to open file '%s' for writing: %s", fname, e)
        return STATUS_ERROR

    with fp:
        try:
            status = write_fabric_bitstream_to_stream(bitstream, protocol, fp, filler_bit)
            # End of file
            write_line(fp)
        except OSError as e:
            logger.error("Failed while writing file '%s': %s", fname, e)
            status = STATUS_ERROR

    if verbose:
        logger.info(
            "Outputted %d configuration bits to plain text file: %s",
            bitstream.num_bits, fname,
        )
    logger.debug(
        "Write %d fabric bitstream into plain text file '%s' took %.2f seconds",
        bitstream.num_bits, fname, time.perf_counter() - start,
    )
    return status
