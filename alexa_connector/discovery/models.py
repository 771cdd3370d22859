"""Pydantic models for the hub's discovery file JSON.

WHY: The discovery file is produced by another system and arrives as
JSON. Before the core can trust it, field types and the two closed
enumerations (display category, capability codes) must be checked.
Pydantic enforces this at runtime and reports every problem at once.

HOW: One model per JSON object. Enum-typed fields reject values outside
DisplayCategory / CapabilityCode. to_ir() converts a validated model
into the frozen core dataclasses.

RULES:
- Field names match the JSON keys exactly (snake_case, as the hub writes them)
- All fields are required; unknown extra keys are ignored
- capability_codes keeps order and duplicates
- Python 3.9+ compatible (no PEP 604 unions, use List from typing)
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from alexa_connector.core.ir import (
    CapabilityCode,
    DiscoveryFile,
    DiscoveryFileDevice,
    DisplayCategory,
)


class DiscoveryFileDeviceModel(BaseModel):
    """One device entry of the discovery file."""

    id: str = Field(description="Endpoint id, unique within the file.")
    friendly_name: str = Field(description="Name Alexa uses for the device.")
    description: str = Field(description="Free-form description shown in the Alexa app.")
    display_category: DisplayCategory = Field(
        description="Alexa display category, e.g. LIGHT or SPEAKER.",
    )
    capability_codes: List[CapabilityCode] = Field(
        description="Internal capability codes, mapped 1:1 to Alexa interfaces.",
    )

    def to_ir(self) -> DiscoveryFileDevice:
        return DiscoveryFileDevice(
            id=self.id,
            friendly_name=self.friendly_name,
            description=self.description,
            display_category=self.display_category,
            capability_codes=tuple(self.capability_codes),
        )


class DiscoveryFileModel(BaseModel):
    """The discovery file root object."""

    queue: str = Field(description="Queue identifier, passed through in each endpoint cookie.")
    devices: List[DiscoveryFileDeviceModel] = Field(
        description="Devices to expose to Alexa, in display order.",
    )

    def to_ir(self) -> DiscoveryFile:
        return DiscoveryFile(
            queue=self.queue,
            devices=tuple(device.to_ir() for device in self.devices),
        )
