"""
Example entrypoint: load the example site document end to end.

This script performs the following steps:
- loads configs/loader.yaml if present (include tag names, enabled passes)
- parses examples/site.yaml and resolves `!include` / `!include_dir_named`
- normalizes terse entries with the node shape functions
- binds the result to the Site record and prints it as JSON

Run it from the repository root: include paths are relative to the working directory.
"""

import argparse
import json
import logging
from pathlib import Path

from application import load_site
from infrastructure.config import LoaderConfig, load_loader_config
from infrastructure.constants import EXAMPLE_DOCUMENT, LOADER_CONFIG_FILE
from infrastructure.io import ensure_exists
from infrastructure.observability import configure_logging

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Load a YAML site document with include tags")
    p.add_argument(
        "--document",
        type=str,
        default=str(EXAMPLE_DOCUMENT),
        help="Path to the site document (default: examples/site.yaml)",
    )
    p.add_argument(
        "--config",
        type=str,
        default=str(LOADER_CONFIG_FILE),
        help="Path to loader.yaml (default: configs/loader.yaml; defaults apply if missing)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Optional rotating log file (DEBUG+)",
    )
    return p.parse_args()


def main() -> None:
    args = _parse_args()

    configure_logging(
        log_file=Path(args.log_file) if args.log_file else None,
        console_level=getattr(logging, args.console_level),
    )

    config_path = Path(args.config)
    if config_path.exists():
        cfg = load_loader_config(config_path)
        logger.info("Loaded loader config from %s", config_path)
    else:
        cfg = LoaderConfig()
        logger.info("No loader config at %s; using defaults", config_path)

    document_path = Path(args.document)
    ensure_exists(document_path, "site document")

    site = load_site(document_path, cfg=cfg)
    logger.info("Loaded site %r: %d host(s), %d service(s)", site.name, len(site.hosts), len(site.services))

    print(json.dumps(site.model_dump(mode="json"), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
