"""Command-line interface for the Alexa Connector.

WHY: Operators need a simple way to see what Alexa will be told about
the hub's devices, and to export the endpoint records for the skill's
transport layer. The CLI wires together the full pipeline — discovery
file loading, endpoint assembly, pluggable formatter output and file
saving — behind a single command.

HOW: Uses argparse to accept a discovery file path, output format
selection, an output directory and a log level. Logging goes to stderr
via logging.basicConfig; output files are saved next to the discovery
file (or to --output-dir), or printed with --stdout.

RULES:
- Positional argument: discovery file path (JSON)
- --formats: comma-separated formatter keys (default from config)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-endpoints-2.json)
- Loading, validation, mapping and output schema errors are logged and
  exit with status 1; no files are written in that case
- The core never logs; this module is the layer that reports its errors
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import jsonschema

from alexa_connector.config import DEFAULT_FORMATS, DEFAULT_LOG_LEVEL
from alexa_connector.core.assembler import assemble_devices
from alexa_connector.core.capabilities import UnmappableCapabilityCode
from alexa_connector.discovery.loader import load_discovery_file
from alexa_connector.formatters import FORMATTERS
from alexa_connector.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Operators may export the same discovery file repeatedly to
    compare results. Overwriting a previous export would lose it.

    RULES:
    - First attempt: {stem}{suffix} (e.g. home-endpoints.json)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. home-endpoints-2.json)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # "-endpoints.json" → ("-endpoints", ".json")
    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _parse_format_keys(formats: str) -> List[str]:
    """Split and validate a comma-separated list of formatter keys.

    Raises:
        ValueError: If any key is not registered in FORMATTERS.
    """
    keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            raise ValueError("Unknown format '{}'. Available formats: {}".format(key, available))
    return keys


def run(args: argparse.Namespace) -> int:
    """Execute the load → assemble → format → save pipeline.

    Returns:
        Process exit status: 0 on success, 1 on any reported error.
    """
    input_path = Path(args.discovery_file).resolve()
    if not input_path.is_file():
        logger.error("File not found: %s", input_path)
        return 1

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if not args.stdout and not output_dir.is_dir():
        logger.error("Output directory does not exist: %s", output_dir)
        return 1

    try:
        format_keys = _parse_format_keys(args.formats)
        discovery_file = load_discovery_file(input_path)
        devices = assemble_devices(discovery_file)
    except UnmappableCapabilityCode as e:
        logger.error("Cannot assemble endpoints from %s: %s", input_path.name, e)
        return 1
    except ValueError as e:
        # DiscoveryFileError or an unknown format key
        logger.error("%s", e)
        return 1

    logger.info("Assembled %d endpoint(s)", len(devices))

    # Nothing is written unless every formatter succeeds.
    outputs: List[FormatterOutput] = []
    try:
        for key in format_keys:
            formatter = FORMATTERS[key]()
            logger.info("Running %s formatter...", formatter.name)
            outputs.extend(formatter.format(devices))
    except jsonschema.ValidationError as e:
        logger.error("Output rejected by %s schema: %s", formatter.name, e.message)
        return 1

    saved_files: List[Path] = []
    for output in outputs:
        if args.stdout:
            sys.stdout.write(output.content)
            if not output.content.endswith("\n"):
                sys.stdout.write("\n")
            continue
        saved_path = _save_output(output, input_path.stem, output_dir)
        saved_files.append(saved_path)
        logger.info("Saved: %s", saved_path.name)

    if saved_files:
        logger.info("Done! Saved %d file(s) to %s", len(saved_files), output_dir)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="alexa_connector",
        description="Translate a home-automation discovery file into Alexa "
                    "Smart Home discovery endpoints.",
    )

    parser.add_argument(
        "discovery_file",
        help="Path to the discovery file (JSON) produced by the hub.",
    )

    parser.add_argument(
        "--formats",
        default=DEFAULT_FORMATS,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: %(default)s.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as the discovery file).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print output to stdout instead of saving files.",
    )

    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
