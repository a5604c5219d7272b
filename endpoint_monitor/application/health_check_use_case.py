"""
Health Check Use Case - Probes every configured endpoint and reports.

Steps:
1. Load the configuration through a ConfigurationLoader
2. Resolve the webhook destination from explicit credentials
3. Probe all endpoints concurrently, keeping configuration order
4. Format the report
5. Deliver it through a Notifier

ConfigurationError and DeliveryError propagate to the caller. Probe
failures never do: they are part of the report.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from endpoint_monitor.application.destination import resolve_webhook_url
from endpoint_monitor.application.report import format_report
from endpoint_monitor.application.use_cases import UseCase
from endpoint_monitor.core.entities import Endpoint, EndpointReport, WebhookCredentials
from endpoint_monitor.core.ports import ConfigurationLoader, Notifier, Prober

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 10


class HealthCheckUseCase(UseCase):  # pylint: disable=too-few-public-methods
    """
    Use case for one scheduled health check run.

    The use case is decoupled from the store, the network and the
    environment through dependency injection of the ports and the
    credentials.
    """

    def __init__(
        self,
        loader: ConfigurationLoader,
        prober: Prober,
        notifier: Notifier,
        credentials: WebhookCredentials,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        """
        Initialize the use case with its dependencies.

        Args:
            loader: Implementation of ConfigurationLoader port
            prober: Implementation of Prober port
            notifier: Implementation of Notifier port
            credentials: Values for the webhook URL placeholders
            max_workers: Upper bound on concurrent probes
        """
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")

        self.loader = loader
        self.prober = prober
        self.notifier = notifier
        self.credentials = credentials
        self.max_workers = max_workers

    def execute(self) -> List[EndpointReport]:
        """
        Run one health check.

        Returns:
            List[EndpointReport]: One report per endpoint, in configuration order

        Raises:
            ConfigurationError: If configuration or credentials are unusable
            DeliveryError: If the report could not be delivered
        """
        configuration = self.loader.load()
        destination_url = resolve_webhook_url(
            configuration.webhook_url, self.credentials
        )

        logger.info("Probing %d endpoints...", len(configuration.endpoints))
        reports = self._probe_all(configuration.endpoints)

        unhealthy = sum(1 for report in reports if not report.healthy)
        logger.info(
            "Probed %d endpoints: %d healthy, %d unhealthy",
            len(reports),
            len(reports) - unhealthy,
            unhealthy,
        )

        content = format_report(reports)
        self.notifier.notify(destination_url, content)
        logger.info("Health report delivered")

        return reports

    def _probe_all(self, endpoints: Sequence[Endpoint]) -> List[EndpointReport]:
        if not endpoints:
            return []

        workers = min(len(endpoints), self.max_workers)
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="probe"
        ) as executor:
            # map() yields results in input order, not completion order
            return list(executor.map(self.prober.probe, endpoints))
