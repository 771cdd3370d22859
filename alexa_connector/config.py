"""Configuration constants, protocol literals, and .env loading.

WHY: Centralizes all fixed protocol values and configurable defaults so
they are easy to find and update. Protocol literals (manufacturer name,
versions, Discovery namespace) are plain module constants — not buried
in assembly or formatting logic.

HOW: python-dotenv loads the .env file on import. Protocol literals are
module-level strings. CLI defaults are read from environment variables
with sensible fallbacks.

RULES:
- MANUFACTURER_NAME and ENDPOINT_VERSION are fixed literals, never
  environment-overridable — Alexa keys endpoint identity on them
- INTERFACE_VERSION is the Alexa Smart Home interface version ("3")
- CLI defaults can be overridden via ALEXA_CONNECTOR_* variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Alexa protocol literals
# ---------------------------------------------------------------------------

MANUFACTURER_NAME = "function61.com"
ENDPOINT_VERSION = "1.0"
"""Version string attached to every endpoint record (not the protocol version)."""

INTERFACE_VERSION = "3"
DISCOVERY_NAMESPACE = "Alexa.Discovery"
DISCOVERY_RESPONSE_NAME = "Discover.Response"
PAYLOAD_VERSION = "3"

# ---------------------------------------------------------------------------
# CLI defaults
# ---------------------------------------------------------------------------

DEFAULT_FORMATS = os.getenv("ALEXA_CONNECTOR_FORMATS", "discover_response")
DEFAULT_LOG_LEVEL = os.getenv("ALEXA_CONNECTOR_LOG_LEVEL", "INFO").upper()
