"""Alexa.Discovery Discover.Response event formatter.

WHY: A Smart Home skill answers Alexa's Discover directive with a
complete Discover.Response event. Producing the whole event here lets
the transport layer forward it verbatim, and lets operators inspect
exactly what Alexa will see.

HOW: Wraps the endpoint records in the event header/payload envelope,
validates the result against discover_response_schema.json with
jsonschema, and serializes it.

RULES:
- header.namespace = "Alexa.Discovery", header.name = "Discover.Response"
- header.payloadVersion = "3"
- header.messageId is a fresh UUID v4 unless a fixed one was given
- Validate output against the schema before returning; raise on failure
- Output suffix: "-discover-response.json"
"""

from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Any

import jsonschema

from alexa_connector.config import (
    DISCOVERY_NAMESPACE,
    DISCOVERY_RESPONSE_NAME,
    PAYLOAD_VERSION,
)
from alexa_connector.core.ir import ExternalDevice
from alexa_connector.formatters.base import BaseFormatter, FormatterOutput

_SCHEMA_PATH = Path(__file__).resolve().parent / "discover_response_schema.json"


def _load_schema() -> dict[str, Any]:
    """Load the Discover.Response JSON schema from disk.

    Cached at module level after first call to avoid repeated I/O.
    """
    with open(_SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_CACHED_SCHEMA: dict[str, Any] | None = None


def _get_schema() -> dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


def build_discover_response(
    devices: list[ExternalDevice],
    message_id: str,
) -> dict[str, Any]:
    """Build the Discover.Response event dict for the given endpoints."""
    return {
        "event": {
            "header": {
                "namespace": DISCOVERY_NAMESPACE,
                "name": DISCOVERY_RESPONSE_NAME,
                "payloadVersion": PAYLOAD_VERSION,
                "messageId": message_id,
            },
            "payload": {
                "endpoints": [device.to_dict() for device in devices],
            },
        }
    }


class DiscoverResponseFormatter(BaseFormatter):
    """Formatter that produces a schema-validated Discover.Response event.

    Args:
        message_id: Fixed header messageId. When None, each format() call
            generates a new UUID v4.
    """

    def __init__(self, message_id: str | None = None) -> None:
        self._message_id = message_id

    @property
    def name(self) -> str:
        return "Discover.Response event"

    def format(self, devices: list[ExternalDevice]) -> list[FormatterOutput]:
        """Convert endpoint records into a Discover.Response event JSON file.

        Raises:
            jsonschema.ValidationError: If the generated event does not
                conform to the Discover.Response schema.
        """
        message_id = self._message_id or str(uuid.uuid4())
        output = build_discover_response(devices, message_id)

        jsonschema.validate(instance=output, schema=_get_schema())

        content = json.dumps(output, indent=2, ensure_ascii=False)

        return [
            FormatterOutput(
                suffix="-discover-response.json",
                content=content,
                media_type="application/json",
            )
        ]
