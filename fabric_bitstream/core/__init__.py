"""Core intermediate representation, grouping and loading modules.

WHY: The core package contains the stable heart of the writer — the IR
dataclasses and the region/address grouping logic. These are consumed
by all encoders and must remain backward-compatible.

HOW: ir.py defines the data structures, grouping.py derives the
transient region and address-group views from them, loader.py builds
the IR from a JSON bit-source document.

RULES:
- IR dataclasses are the contract — change with care
- Grouping logic is format-agnostic — no text emission here
- Loader validates input with jsonschema before building the IR
"""
