#!/usr/bin/env python3
"""
Endpoint Monitor CLI - Runs one health check and posts the report.

Usage:
    python -m endpoint_monitor.interface.watch [--store configs/store.json] [--dry-run]

Intended to be run by cron or a systemd timer.

Exit codes:
    0: Report delivered
    3: Run failed (configuration or delivery error)
"""

import argparse
import logging
import os
import sys
from typing import List, Mapping, Optional

from endpoint_monitor.adapters.config.loader import (
    DEFAULT_COLLECTION,
    DEFAULT_KEY,
    AdapterStoreConfigurationLoader,
)
from endpoint_monitor.adapters.notifiers import (
    AdapterStdoutNotifier,
    AdapterWebhookNotifier,
)
from endpoint_monitor.adapters.probers import AdapterHttpProber
from endpoint_monitor.application.health_check_use_case import (
    DEFAULT_MAX_WORKERS,
    HealthCheckUseCase,
)
from endpoint_monitor.core.entities import WebhookCredentials
from endpoint_monitor.core.exceptions import ConfigurationError, DeliveryError

EXIT_OK = 0
EXIT_FAIL = 3
EXIT_INTERRUPTED = 130

STORE_ENV = "ENDPOINT_MONITOR_STORE"
WEBHOOK_ID_ENV = "DISCORD_WEBHOOK_ID"
WEBHOOK_TOKEN_ENV = "DISCORD_WEBHOOK_TOKEN"


def setup_logging(verbose: bool = False) -> None:
    """
    Setup logging configuration.

    Args:
        verbose: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_credentials(environ: Optional[Mapping[str, str]] = None) -> WebhookCredentials:
    """
    Read webhook credentials from the environment.

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        WebhookCredentials with None for unset variables
    """
    env = os.environ if environ is None else environ
    return WebhookCredentials(
        webhook_id=env.get(WEBHOOK_ID_ENV),
        webhook_token=env.get(WEBHOOK_TOKEN_ENV),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Probe configured endpoints and post a health report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Environment:
  {STORE_ENV}  Store file (default: configs/store.json)
  {WEBHOOK_ID_ENV}      Substituted for $DISCORD_WEBHOOK_ID in webhook_url
  {WEBHOOK_TOKEN_ENV}   Substituted for $DISCORD_WEBHOOK_TOKEN in webhook_url

Exit codes:
  0  - Report delivered
  3  - Run failed

Examples:
  endpoint-monitor
  endpoint-monitor --store /etc/endpoint-monitor/store.json --timeout 10
  endpoint-monitor --dry-run -v
        """,
    )

    parser.add_argument(
        "--store",
        default=None,
        help=f"Path to the store file (default: ${STORE_ENV} or configs/store.json)",
    )
    parser.add_argument(
        "--collection",
        default=DEFAULT_COLLECTION,
        help=f"Store collection holding the configuration (default: {DEFAULT_COLLECTION})",
    )
    parser.add_argument(
        "--key",
        default=DEFAULT_KEY,
        help=f"Key of the configuration document (default: {DEFAULT_KEY})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Probe timeout in seconds (default: no timeout)",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=DEFAULT_MAX_WORKERS,
        help=f"Maximum concurrent probes (default: {DEFAULT_MAX_WORKERS})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Don't send the webhook, just print the report",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code: 0 on success, 3 on failure
    """
    args = build_parser().parse_args(argv)

    setup_logging(verbose=args.verbose)
    logger = logging.getLogger(__name__)

    if args.max_workers < 1:
        logger.error("--max-workers must be at least 1")
        return EXIT_FAIL

    store_path = args.store or os.environ.get(STORE_ENV)
    credentials = load_credentials()

    if args.dry_run:
        logger.info("Dry-run mode: No webhook notification will be sent")
        notifier = AdapterStdoutNotifier()
        # The destination is never used, so placeholders need no values
        credentials = WebhookCredentials(
            webhook_id=credentials.webhook_id or "dry-run",
            webhook_token=credentials.webhook_token or "dry-run",
        )
    else:
        notifier = AdapterWebhookNotifier()

    use_case = HealthCheckUseCase(
        loader=AdapterStoreConfigurationLoader(
            store_path, collection=args.collection, key=args.key
        ),
        prober=AdapterHttpProber(timeout=args.timeout),
        notifier=notifier,
        credentials=credentials,
        max_workers=args.max_workers,
    )

    try:
        reports = use_case.execute()
    except KeyboardInterrupt:
        logger.error("Health check interrupted by user")
        return EXIT_INTERRUPTED
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e, exc_info=True)
        return EXIT_FAIL
    except DeliveryError as e:
        logger.error("Report delivery failed: %s", e, exc_info=True)
        return EXIT_FAIL

    logger.info("Health check completed for %d endpoints", len(reports))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
