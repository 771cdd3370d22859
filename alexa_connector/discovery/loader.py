"""Discovery file loading from dicts and from disk.

WHY: Callers hold the discovery file either as an already-decoded JSON
object (e.g. fetched by a transport layer) or as a file on disk (CLI).
Both paths need the same validation and the same error type.

HOW: parse_discovery_file() validates a dict with DiscoveryFileModel and
converts it to the core DiscoveryFile. load_discovery_file() reads and
decodes UTF-8 JSON, then delegates to parse_discovery_file().

RULES:
- Every failure is raised as DiscoveryFileError, chained to its cause
- The pydantic ValidationError text is kept in the message for operators
- Successful loads are logged at INFO, failures at WARNING
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from alexa_connector.core.ir import DiscoveryFile
from alexa_connector.discovery.models import DiscoveryFileModel

logger = logging.getLogger(__name__)


class DiscoveryFileError(ValueError):
    """The discovery file could not be read, decoded or validated."""


def parse_discovery_file(data: Any) -> DiscoveryFile:
    """Validate a decoded discovery file and convert it to the core dataclass.

    Args:
        data: The decoded JSON object (normally a dict).

    Returns:
        A frozen DiscoveryFile ready for assemble_devices().

    Raises:
        DiscoveryFileError: If the object does not match the discovery file
            shape, or uses an unknown display category or capability code.
    """
    try:
        model = DiscoveryFileModel.model_validate(data)
    except ValidationError as e:
        logger.warning("Invalid discovery file: %d error(s)", e.error_count())
        raise DiscoveryFileError("Invalid discovery file: {}".format(e)) from e
    return model.to_ir()


def load_discovery_file(path: Union[str, Path]) -> DiscoveryFile:
    """Read a discovery file JSON document from disk.

    Raises:
        DiscoveryFileError: If the file cannot be read or is not valid JSON,
            or on any validation failure from parse_discovery_file().
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read discovery file %s: %s", path, e)
        raise DiscoveryFileError("Cannot read discovery file {}: {}".format(path, e)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Discovery file %s is not valid JSON: %s", path, e)
        raise DiscoveryFileError("Discovery file {} is not valid JSON: {}".format(path, e)) from e

    discovery_file = parse_discovery_file(data)
    logger.info(
        "Loaded discovery file %s (queue %s, %d devices)",
        path, discovery_file.queue, len(discovery_file.devices),
    )
    return discovery_file
