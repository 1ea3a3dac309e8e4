#!/usr/bin/env python3
"""
cfzone - Command Line Interface

Main entry point for the cfzone CLI.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List

import yaml

from ..core.errors import CfzoneError, ConfigurationError, PolicyAbort
from ..core.options import SyncOptions
from ..core.version_guard import REVISION
from ..core.zone_sync import ZoneSync, console
from ..providers.dns_client import DNSClient

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "configs/config.yaml"


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI parser."""
    parser = argparse.ArgumentParser(
        prog="cfzone",
        description="Synchronise a DNS zone file with Cloudflare",
    )

    parser.add_argument("zonefile", nargs="?", help="Path to the zone file")

    parser.add_argument("--yes", action="store_true", help="Don't ask before syncing")

    parser.add_argument(
        "--leaveunknown", action="store_true", help="Don't delete unknown records"
    )

    parser.add_argument(
        "--ignorespf",
        action="store_true",
        help="Ignore SPF RR type (Not supported by this tool; use TXT for SPF records)",
    )

    parser.add_argument(
        "--ignoresrv",
        action="store_true",
        help="Ignore SRV RR type (Not supported by this tool)",
    )

    parser.add_argument(
        "--origin", default="", help="Specify origin to resolve '@' at the top level"
    )

    parser.add_argument(
        "--autottl",
        type=int,
        default=0,
        help="Specify TTL to interpret as Cloudflare automatic",
    )

    parser.add_argument(
        "--cachettl",
        type=int,
        default=1,
        help="Specify TTL to interpret as Cloudflare caching",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be changed without making changes",
    )

    parser.add_argument(
        "--config",
        "-c",
        default=DEFAULT_CONFIG,
        help=f"Configuration file path (default: {DEFAULT_CONFIG})",
    )

    parser.add_argument("--version", action="store_true", help="Print version")

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    return parser


def main(argv: List[str] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(REVISION)
        return 0

    if not args.zonefile:
        parser.print_usage(sys.stderr)
        print("Zone file must be specified", file=sys.stderr)
        return 1

    try:
        config = load_config(args.config)
        config_logger(config, args.verbose)

        options = build_options(args, config)
        dns_client = DNSClient(apply_environment(config))
        ZoneSync(dns_client, options).run(args.zonefile, dry_run=args.dry_run)

    except PolicyAbort:
        console.print("Aborting...")
        return 0

    except CfzoneError as e:
        logger.debug(f"Run failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    return 0


def build_options(args: argparse.Namespace, config: Dict) -> SyncOptions:
    """Combine command-line flags and configuration into run options."""
    excluded = {record_type.upper() for record_type in config.get("excluded_types") or []}
    if args.ignorespf:
        excluded.add("SPF")
    if args.ignoresrv:
        excluded.add("SRV")

    return SyncOptions(
        skip_confirmation=args.yes,
        preserve_unknown=args.leaveunknown,
        excluded_types=frozenset(excluded),
        origin_override=args.origin,
        auto_ttl=args.autottl,
        cache_ttl=args.cachettl,
    )


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    if not Path(config_path).exists():
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
        return config
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Error reading config file {config_path}: {e}") from e


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "dns_providers": {"cloudflare": {}},
        "default_provider": "cloudflare",
        "excluded_types": [],
        "logging": {"level": "WARNING"},
    }


def apply_environment(config: Dict) -> Dict:
    """Overlay Cloudflare credentials from the environment onto config."""
    providers = dict(config.get("dns_providers") or {})
    cloudflare = dict(providers.get("cloudflare") or {})

    for key, variable in (
        ("api_key", "CF_API_KEY"),
        ("api_email", "CF_API_EMAIL"),
        ("api_token", "CF_API_TOKEN"),
    ):
        value = os.getenv(variable)
        if value:
            cloudflare[key] = value

    providers["cloudflare"] = cloudflare
    return {**config, "dns_providers": providers}


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging", None) or {}
    log_level = "DEBUG" if verbose else logging_config.get("level", "WARNING")
    log_file = logging_config.get("file")

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


if __name__ == "__main__":
    sys.exit(main())
