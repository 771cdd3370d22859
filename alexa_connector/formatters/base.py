"""Formatter interface shared by every output shape.

All formatters take the assembled endpoint list and return the files to
write. Suffixes start with a hyphen; the CLI prepends the discovery file
stem.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from alexa_connector.core.ir import ExternalDevice


@dataclass
class FormatterOutput:
    """One output file: ``suffix`` (e.g. ``"-endpoints.json"``), text content, MIME type."""

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Serializes endpoints; register subclasses in ``FORMATTERS``."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, used in log lines."""

    @abstractmethod
    def format(self, devices: list[ExternalDevice]) -> list[FormatterOutput]:
        """Serialize the endpoints, in order.

        Raises:
            jsonschema.ValidationError: For formatters that validate their
                output against a schema.
        """
