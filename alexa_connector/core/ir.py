"""Dataclasses for discovery files and assembled Alexa endpoints.

WHY: The hub's discovery file is a deliberately small vocabulary: an id,
two display strings, one display category and a list of capability
codes. Alexa's discovery protocol wants a much richer endpoint record.
Modelling both ends as typed dataclasses keeps the translation in
assembler.py honest and makes the boundary explicit.

HOW: Two closed enumerations and four dataclasses:
  CapabilityCode      — internal capability vocabulary shared with the hub
  DisplayCategory     — Alexa display categories a device may declare
  DiscoveryFileDevice — one device as described by the hub
  DiscoveryFile       — the queue identifier plus the ordered devices
  ExternalDevice      — one Alexa endpoint record (the output)

RULES:
- Input dataclasses are frozen and use tuples; the core never mutates them
- CapabilityCode values equal their names and match the Alexa interface
  namespace without the "Alexa." prefix
- ExternalDevice.to_dict() emits exactly the Discover.Response endpoint
  fields, camelCase, and nothing else
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from alexa_connector.core.capabilities import AlexaInterface


class CapabilityCode(str, Enum):
    """Capability codes used between the hub and this connector only."""

    PowerController = "PowerController"
    BrightnessController = "BrightnessController"
    ColorController = "ColorController"
    PlaybackController = "PlaybackController"
    ColorTemperatureController = "ColorTemperatureController"


class DisplayCategory(str, Enum):
    """Alexa display categories.

    See https://developer.amazon.com/docs/device-apis/alexa-discovery.html#display-categories
    """

    ACTIVITY_TRIGGER = "ACTIVITY_TRIGGER"
    CAMERA = "CAMERA"
    DOOR = "DOOR"
    LIGHT = "LIGHT"
    OTHER = "OTHER"
    SCENE_TRIGGER = "SCENE_TRIGGER"
    SMARTLOCK = "SMARTLOCK"
    SMARTPLUG = "SMARTPLUG"
    SPEAKER = "SPEAKER"
    SWITCH = "SWITCH"
    TEMPERATURE_SENSOR = "TEMPERATURE_SENSOR"
    THERMOSTAT = "THERMOSTAT"
    TV = "TV"


@dataclass(frozen=True)
class DiscoveryFileDevice:
    """One device as described by the hub's discovery file.

    RULES:
    - id: caller-assigned, expected unique within the file (not enforced)
    - capability_codes: ordered; duplicates are kept as-is
    """

    id: str
    friendly_name: str
    description: str
    display_category: DisplayCategory
    capability_codes: tuple[CapabilityCode, ...] = ()


@dataclass(frozen=True)
class DiscoveryFile:
    """The root discovery file: queue identifier plus ordered devices."""

    queue: str
    devices: tuple[DiscoveryFileDevice, ...] = ()


@dataclass
class ExternalDevice:
    """One Alexa endpoint record, ready for a Discover.Response payload.

    WHY: Alexa needs a manufacturer, a version, display categories, the
    full capability-interface descriptors and an opaque cookie that it
    hands back on every later directive for this endpoint.

    HOW: Built by assemble_devices(). Attributes are snake_case; to_dict()
    produces the camelCase wire form.

    RULES:
    - display_categories always holds exactly one entry
    - capabilities[i] corresponds to the device's capability_codes[i]
    - cookie always carries exactly {"queue": <discovery file queue>}
    """

    endpoint_id: str
    manufacturer_name: str
    version: str
    friendly_name: str
    description: str
    display_categories: list[str]
    capabilities: list[AlexaInterface] = field(default_factory=list)
    cookie: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "endpointId": self.endpoint_id,
            "manufacturerName": self.manufacturer_name,
            "version": self.version,
            "friendlyName": self.friendly_name,
            "description": self.description,
            "displayCategories": list(self.display_categories),
            "capabilities": [cap.to_dict() for cap in self.capabilities],
            "cookie": dict(self.cookie),
        }
