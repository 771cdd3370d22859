"""Shared test fixtures for the alexa_connector test suite.

WHY: Multiple test modules need the same sample discovery file — the
desk lamp example plus a few richer devices. Centralizing fixtures here
avoids duplication and keeps every module on the same reference data.

HOW: Pytest fixtures provide the raw JSON dict (as the hub writes it),
the equivalent frozen DiscoveryFile, and the assembled endpoints.

RULES:
- SAMPLE_DISCOVERY_JSON is what the hub would upload, snake_case keys
- The DiscoveryFile fixture is built by hand, not through the loader,
  so core tests do not depend on the boundary layer
"""

from typing import Any, Dict

import pytest

from alexa_connector.core.assembler import assemble_devices
from alexa_connector.core.ir import (
    CapabilityCode,
    DiscoveryFile,
    DiscoveryFileDevice,
    DisplayCategory,
)

SAMPLE_QUEUE = "https://sqs.us-east-1.amazonaws.com/123456789012/hautomo"

SAMPLE_DISCOVERY_JSON: Dict[str, Any] = {
    "queue": SAMPLE_QUEUE,
    "devices": [
        {
            "id": "d1",
            "friendly_name": "Lamp",
            "description": "desk lamp",
            "display_category": "LIGHT",
            "capability_codes": ["PowerController", "BrightnessController"],
        },
        {
            "id": "d2",
            "friendly_name": "Living room bulb",
            "description": "IKEA Tradfri RGB",
            "display_category": "LIGHT",
            "capability_codes": [
                "PowerController",
                "BrightnessController",
                "ColorController",
                "ColorTemperatureController",
            ],
        },
        {
            "id": "d3",
            "friendly_name": "Amplifier",
            "description": "Harmony hub amplifier",
            "display_category": "SPEAKER",
            "capability_codes": ["PowerController", "PlaybackController"],
        },
    ],
}


@pytest.fixture
def sample_discovery_json():
    """A fresh copy of the sample discovery file dict."""
    return {
        "queue": SAMPLE_DISCOVERY_JSON["queue"],
        "devices": [dict(d, capability_codes=list(d["capability_codes"])) for d in SAMPLE_DISCOVERY_JSON["devices"]],
    }


@pytest.fixture
def desk_lamp_file():
    """The single-device example: queue q-1, one desk lamp."""
    return DiscoveryFile(
        queue="q-1",
        devices=(
            DiscoveryFileDevice(
                id="d1",
                friendly_name="Lamp",
                description="desk lamp",
                display_category=DisplayCategory.LIGHT,
                capability_codes=(
                    CapabilityCode.PowerController,
                    CapabilityCode.BrightnessController,
                ),
            ),
        ),
    )


@pytest.fixture
def sample_discovery_file():
    """DiscoveryFile equivalent of SAMPLE_DISCOVERY_JSON."""
    return DiscoveryFile(
        queue=SAMPLE_QUEUE,
        devices=tuple(
            DiscoveryFileDevice(
                id=d["id"],
                friendly_name=d["friendly_name"],
                description=d["description"],
                display_category=DisplayCategory(d["display_category"]),
                capability_codes=tuple(CapabilityCode(c) for c in d["capability_codes"]),
            )
            for d in SAMPLE_DISCOVERY_JSON["devices"]
        ),
    )


@pytest.fixture
def sample_endpoints(sample_discovery_file):
    """Assembled endpoints for the sample discovery file."""
    return assemble_devices(sample_discovery_file)
