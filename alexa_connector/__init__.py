"""Alexa Connector — discovery file to Alexa endpoint translation.

WHY: The home-automation hub describes its devices in a small internal
discovery file (device id, name, display category, capability codes).
Alexa's Smart Home discovery protocol needs much richer endpoint records
with full capability-interface descriptors. This package is the bridge.

HOW: Three-stage pipeline — load (discovery file boundary validation),
assemble (core endpoint records), format (pluggable serializers).
Each stage is independently testable.

RULES:
- The core is pure: no I/O, no logging, no shared state
- Capability codes are the stable contract between hub and connector
- Adding a new output shape = one new formatter module, no core changes
"""

__version__ = "0.1.0"
