"""Command line entrypoint.

Loads one property file and prints its entries, with origins when the
source tracks them. `--plain` prints a bare `.properties` rendering and
`--json` prints every source as a JSON object.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from src.core.resource import FileSystemResource
from src.core.settings import Settings, SettingsError, load_settings
from src.libs.loader import PropertySourceLoaderFactory
from src.libs.loader.properties_writer import dumps, escape_key, escape_value
from src.observability.logger import get_logger

DEFAULT_SETTINGS_PATH = "config/settings.yaml"


def _load_settings(path: str, explicit: bool) -> Settings:
    if not explicit and not Path(path).exists():
        return Settings()
    return load_settings(path)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the properties loaded from a file")
    parser.add_argument("file", help="Path to a .properties or .xml file")
    parser.add_argument("--name", default=None, help="Property source name (defaults to file name)")
    parser.add_argument("--settings", default=None, help="Settings file path")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--plain", action="store_true", help="Print key=value lines without origins")
    output.add_argument("--json", action="store_true", help="Print sources as JSON")
    args = parser.parse_args(argv)

    logger = get_logger()

    try:
        settings = _load_settings(args.settings or DEFAULT_SETTINGS_PATH, args.settings is not None)
    except SettingsError as e:
        logger.error(str(e))
        return 1

    logger.setLevel(settings.observability.log_level)
    logger.debug(
        "Settings loaded (encoding=%s, expand_lists=%s)",
        settings.loader.properties_encoding,
        settings.loader.expand_lists,
    )

    resource = FileSystemResource(args.file)
    name = args.name or resource.filename or args.file

    if not resource.exists():
        logger.error("Property file not found: %s", resource.description)
        return 1

    try:
        sources = PropertySourceLoaderFactory.load(name, resource, settings=settings)
    except (OSError, ValueError, RuntimeError) as e:
        logger.error("Failed to load %s: %s", resource.description, e)
        return 1

    if args.json:
        print(json.dumps([source.to_dict() for source in sources], ensure_ascii=False, indent=2))
        return 0

    for source in sources:
        if args.plain:
            print(dumps(source.source), end="")
            continue
        for key in source.property_names:
            line = f"{escape_key(key)}={escape_value(source.get_property(key) or '')}"
            origin = source.get_origin(key)
            if origin is not None:
                line = f"{line}  # {origin}"
            print(line)

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
