"""Core data types, capability mapping and endpoint assembly.

WHY: The core package is the stable heart of the connector — the
discovery-file and endpoint dataclasses, the capability-interface
registry, and the assembly of Alexa endpoint records.

HOW: ir.py defines the data structures, capabilities.py holds the
constant interface descriptors, assembler.py builds endpoints from
a DiscoveryFile.

RULES:
- Pure functions only — no I/O, no logging, no module state that changes
- Errors propagate to the caller; the core never swallows or logs them
"""
