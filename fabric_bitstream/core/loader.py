"""Load a fabric bitstream from a JSON bit-source document.

WHY: Upstream flows hand the writer a resolved bitstream: every bit's
value plus the address annotations its protocol needs. JSON keeps that
hand-off readable and easy to produce from any tool.

HOW: The document is parsed with json, validated against
BITSTREAM_SCHEMA with jsonschema, then fed bit by bit into a
FabricBitstream so the IR's own width and region checks apply.

RULES:
- Only BitstreamLoadError (a ValueError) escapes this module
- ``protocol`` and ``num_regions`` are optional in the document
- Bit values are 0, 1, true or false
- Address fields are non-empty '0'/'1' strings, MSB first
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jsonschema

from fabric_bitstream.core.ir import ConfigBit, FabricBitstream, ProtocolKind

# \Z: a trailing "\n" would satisfy $
_ADDRESS_SCHEMA: Dict[str, Any] = {"type": "string", "pattern": "^[01]+\\Z"}

BITSTREAM_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Fabric bitstream bit source",
    "type": "object",
    "required": ["bits"],
    "properties": {
        "protocol": {"type": "string", "enum": [kind.value for kind in ProtocolKind]},
        "num_regions": {"type": "integer", "minimum": 1},
        "bits": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["value"],
                "properties": {
                    "value": {
                        "anyOf": [
                            {"type": "boolean"},
                            {"type": "integer", "minimum": 0, "maximum": 1},
                        ],
                    },
                    "region": {"type": "integer", "minimum": 0},
                    "address": _ADDRESS_SCHEMA,
                    "bl": _ADDRESS_SCHEMA,
                    "wl": _ADDRESS_SCHEMA,
                },
                "additionalProperties": False,
            },
        },
    },
    "additionalProperties": False,
}


class BitstreamLoadError(ValueError):
    """The bit source could not be read, parsed or validated."""


@dataclass
class LoadedBitstream:
    """A loaded bitstream and the protocol its document names, if any."""

    bitstream: FabricBitstream
    protocol: Optional[ProtocolKind] = None


def parse_bitstream(document: Dict[str, Any]) -> LoadedBitstream:
    """Validate a decoded bit-source document and build the IR.

    Raises:
        BitstreamLoadError: schema violation, region out of range or
            address width mismatch.
    """
    try:
        jsonschema.validate(instance=document, schema=BITSTREAM_SCHEMA)
    except jsonschema.ValidationError as e:
        location = "/".join(str(part) for part in e.absolute_path) or "<root>"
        raise BitstreamLoadError("Invalid bit source at {}: {}".format(location, e.message)) from e

    # JSON Schema "integer" admits 2.0; the IR needs real ints
    num_regions = document.get("num_regions")
    bitstream = FabricBitstream(regions=int(num_regions) if num_regions is not None else None)
    try:
        for entry in document["bits"]:
            bitstream.add_bit(ConfigBit(
                value=bool(entry["value"]),
                region=int(entry.get("region", 0)),
                address=entry.get("address"),
                bl=entry.get("bl"),
                wl=entry.get("wl"),
            ))
    except ValueError as e:
        raise BitstreamLoadError(str(e)) from e

    protocol = ProtocolKind.coerce(document["protocol"]) if "protocol" in document else None
    return LoadedBitstream(bitstream=bitstream, protocol=protocol)


def load_bitstream(path: Union[str, Path]) -> LoadedBitstream:
    """Read and parse a bit-source JSON file.

    Raises:
        BitstreamLoadError: unreadable file, malformed JSON or invalid content.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise BitstreamLoadError("Cannot read bit source '{}': {}".format(path, e)) from e
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise BitstreamLoadError("Malformed JSON in '{}': {}".format(path, e)) from e
    return parse_bitstream(document)
