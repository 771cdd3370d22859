"""Output formatter registry — pluggable serializers for assembled endpoints.

WHY: The CLI needs a single lookup to find the right formatter by name.
A central dict makes it trivial to add new output shapes: create the
formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["endpoints"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and config)
- Values are BaseFormatter subclasses, constructible without arguments
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from alexa_connector.formatters.discover_response import DiscoverResponseFormatter
from alexa_connector.formatters.endpoints import EndpointsFormatter
from alexa_connector.formatters.plain_text import PlainTextFormatter

if TYPE_CHECKING:
    from alexa_connector.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "discover_response": DiscoverResponseFormatter,
    "endpoints": EndpointsFormatter,
    "plain_text": PlainTextFormatter,
}
