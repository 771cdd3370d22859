"""Bare endpoint array formatter.

WHY: The transport layer that answers Alexa's Discover directive builds
its own response envelope; it only needs the endpoint records.

HOW: Serializes each ExternalDevice via to_dict() into a JSON array.

RULES:
- Output is a JSON array, same order as the assembled devices
- Output suffix: "-endpoints.json"
"""

from __future__ import annotations

import json

from alexa_connector.core.ir import ExternalDevice
from alexa_connector.formatters.base import BaseFormatter, FormatterOutput


class EndpointsFormatter(BaseFormatter):
    """Formatter that writes the endpoint records as a JSON array."""

    @property
    def name(self) -> str:
        return "Endpoint array JSON"

    def format(self, devices: list[ExternalDevice]) -> list[FormatterOutput]:
        content = json.dumps(
            [device.to_dict() for device in devices],
            indent=2,
            ensure_ascii=False,
        )
        return [
            FormatterOutput(
                suffix="-endpoints.json",
                content=content,
                media_type="application/json",
            )
        ]
