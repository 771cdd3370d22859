"""Discovery file boundary — JSON parsing and validation.

WHY: The core assumes its input is already well-formed: known display
categories and known capability codes only. This package is where that
assumption is enforced, before anything reaches the assembler.

HOW: pydantic models describe the JSON shape; the loader turns raw
JSON (dict or file on disk) into core DiscoveryFile dataclasses.

RULES:
- All discovery file parsing goes through this package
- Validation failures surface as DiscoveryFileError
"""

from alexa_connector.discovery.loader import (
    DiscoveryFileError,
    load_discovery_file,
    parse_discovery_file,
)

__all__ = ["DiscoveryFileError", "load_discovery_file", "parse_discovery_file"]
