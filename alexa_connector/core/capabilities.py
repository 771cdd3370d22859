"""Alexa capability-interface descriptors and the capability code mapper.

WHY: The hub speaks a small, versioned vocabulary of capability codes so
it never needs to know Alexa's schema. Alexa, on the other hand, needs a
full interface descriptor per capability (namespace, version, supported
properties or operations). This module is the only place that knows
both vocabularies.

HOW: Each descriptor is a frozen AlexaInterface constant. The registry
CAPABILITY_INTERFACES maps every CapabilityCode to its descriptor and is
checked for totality at import time. map_capability_code() is a lookup
that fails loudly on anything outside the closed enumeration.

RULES:
- Every CapabilityCode maps to exactly one descriptor — never to None
- Descriptors are constants; to_dict() hands out fresh dicts each call
- Unknown codes raise UnmappableCapabilityCode; there is no default
- namespace equals the capability code name; interface adds "Alexa."
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from alexa_connector.config import INTERFACE_VERSION
from alexa_connector.core.ir import CapabilityCode


class UnmappableCapabilityCode(ValueError):
    """A capability code outside the closed CapabilityCode enumeration.

    This is a contract error: the hub started emitting a code that this
    connector does not know. Assembly must abort rather than publish an
    endpoint with fewer capabilities than the device really has.
    """

    def __init__(self, code: Any) -> None:
        self.code = code
        super().__init__("unmappable capability code: {!r}".format(code))


@dataclass(frozen=True)
class AlexaInterface:
    """One Alexa capability-interface descriptor.

    RULES:
    - namespace: interface name without the "Alexa." prefix
    - supported_properties: state properties (powerState, brightness, ...)
    - supported_operations: only used by PlaybackController
    - proactively_reported / retrievable: always False — the hub neither
      pushes state changes nor answers ReportState
    """

    namespace: str
    version: str = INTERFACE_VERSION
    supported_properties: tuple[str, ...] = ()
    supported_operations: tuple[str, ...] = ()
    proactively_reported: bool = False
    retrievable: bool = False

    @property
    def interface(self) -> str:
        return "Alexa.{}".format(self.namespace)

    def to_dict(self) -> dict[str, Any]:
        """Return the Discover.Response capability object for this interface."""
        out: dict[str, Any] = {
            "type": "AlexaInterface",
            "interface": self.interface,
            "version": self.version,
        }
        if self.supported_properties:
            out["properties"] = {
                "supported": [{"name": name} for name in self.supported_properties],
                "proactivelyReported": self.proactively_reported,
                "retrievable": self.retrievable,
            }
        if self.supported_operations:
            out["supportedOperations"] = list(self.supported_operations)
        return out


POWER_CONTROLLER = AlexaInterface(
    namespace="PowerController",
    supported_properties=("powerState",),
)

BRIGHTNESS_CONTROLLER = AlexaInterface(
    namespace="BrightnessController",
    supported_properties=("brightness",),
)

COLOR_CONTROLLER = AlexaInterface(
    namespace="ColorController",
    supported_properties=("color",),
)

PLAYBACK_CONTROLLER = AlexaInterface(
    namespace="PlaybackController",
    supported_operations=("Play", "Pause", "Stop"),
)

COLOR_TEMPERATURE_CONTROLLER = AlexaInterface(
    namespace="ColorTemperatureController",
    supported_properties=("colorTemperatureInKelvin",),
)

CAPABILITY_INTERFACES: Mapping[CapabilityCode, AlexaInterface] = MappingProxyType({
    CapabilityCode.PowerController: POWER_CONTROLLER,
    CapabilityCode.BrightnessController: BRIGHTNESS_CONTROLLER,
    CapabilityCode.ColorController: COLOR_CONTROLLER,
    CapabilityCode.PlaybackController: PLAYBACK_CONTROLLER,
    CapabilityCode.ColorTemperatureController: COLOR_TEMPERATURE_CONTROLLER,
})


def _check_registry() -> None:
    # A new enum member without a descriptor must not get past import.
    for code in CapabilityCode:
        if code not in CAPABILITY_INTERFACES:
            raise UnmappableCapabilityCode(code.value)


_check_registry()


def map_capability_code(code: CapabilityCode | str) -> AlexaInterface:
    """Map one capability code to its Alexa interface descriptor.

    Args:
        code: A CapabilityCode member, or its string value.

    Returns:
        The constant AlexaInterface for the code. Same object every call.

    Raises:
        UnmappableCapabilityCode: If the code is not a CapabilityCode.
    """
    try:
        member = CapabilityCode(code)
    except ValueError:
        raise UnmappableCapabilityCode(code) from None

    try:
        return CAPABILITY_INTERFACES[member]
    except KeyError:
        raise UnmappableCapabilityCode(code) from None
