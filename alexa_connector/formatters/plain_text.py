"""Plain text device summary formatter.

WHY: Before syncing to Alexa, operators want a quick, readable check of
which devices will be exposed and with what capabilities.

HOW: One line per endpoint, in order:
    Lamp (d1) [LIGHT]: PowerController, BrightnessController

RULES:
- Capability names are the interface namespace without "Alexa."
- Devices without capabilities show "(none)"
- Output ends with a trailing newline unless there are no devices
- Output suffix: "-devices.txt"
"""

from __future__ import annotations

from typing import List

from alexa_connector.core.ir import ExternalDevice
from alexa_connector.formatters.base import BaseFormatter, FormatterOutput


def _format_line(device: ExternalDevice) -> str:
    caps = ", ".join(cap.namespace for cap in device.capabilities) or "(none)"
    return "{} ({}) [{}]: {}".format(
        device.friendly_name,
        device.endpoint_id,
        ", ".join(device.display_categories),
        caps,
    )


class PlainTextFormatter(BaseFormatter):
    """Formatter that produces a human-readable device summary."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, devices: List[ExternalDevice]) -> List[FormatterOutput]:
        lines = [_format_line(device) for device in devices]
        content = "\n".join(lines) + "\n" if lines else ""
        return [
            FormatterOutput(
                suffix="-devices.txt",
                content=content,
                media_type="text/plain",
            )
        ]
