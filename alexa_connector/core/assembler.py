"""Discovery file to Alexa endpoint assembly.

WHY: The hub hands over a DiscoveryFile with a few fields per device.
Alexa's Discover.Response needs a complete endpoint record per device.
This module is the bridge between the two shapes.

HOW: For each device, in order: map every capability code through
map_capability_code(), then wrap the device fields, the fixed protocol
literals and the queue cookie into an ExternalDevice.

RULES:
- One ExternalDevice per input device, same order
- One capability per input code, same order, duplicates kept
- displayCategories is always a one-element list
- cookie is exactly {"queue": file.queue}
- Any unmappable code aborts the whole call; no partial results
"""

from __future__ import annotations

from alexa_connector.config import ENDPOINT_VERSION, MANUFACTURER_NAME
from alexa_connector.core.capabilities import map_capability_code
from alexa_connector.core.ir import (
    DiscoveryFile,
    DiscoveryFileDevice,
    DisplayCategory,
    ExternalDevice,
)


def _assemble_device(device: DiscoveryFileDevice, queue: str) -> ExternalDevice:
    capabilities = [map_capability_code(code) for code in device.capability_codes]

    return ExternalDevice(
        endpoint_id=device.id,
        manufacturer_name=MANUFACTURER_NAME,
        version=ENDPOINT_VERSION,
        friendly_name=device.friendly_name,
        description=device.description,
        display_categories=[_category_value(device.display_category)],
        capabilities=capabilities,
        cookie={"queue": queue},
    )


def _category_value(category: DisplayCategory | str) -> str:
    # DisplayCategory is a str enum; emit its plain value on the wire
    return getattr(category, "value", category)


def assemble_devices(file: DiscoveryFile) -> list[ExternalDevice]:
    """Build Alexa endpoint records for every device in a discovery file.

    Args:
        file: The discovery file. Not modified.

    Returns:
        List of ExternalDevice, same length and order as file.devices.

    Raises:
        UnmappableCapabilityCode: If any device carries a capability code
            outside the CapabilityCode enumeration.
    """
    return [_assemble_device(device, file.queue) for device in file.devices]
