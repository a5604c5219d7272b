"""
Core ports - Interfaces the health check use case depends on.

Adapters implement these so the use case never touches the store,
the network or the environment directly.
"""

from abc import ABC, abstractmethod

from endpoint_monitor.core.entities import Configuration, Endpoint, EndpointReport


class ConfigurationLoader(ABC):  # pylint: disable=too-few-public-methods
    """Loads the run configuration from an external store."""

    @abstractmethod
    def load(self) -> Configuration:
        """
        Load a fresh configuration.

        Returns:
            Configuration: Endpoints and webhook URL template

        Raises:
            ConfigurationError: If the configuration is unavailable or malformed
        """


class Prober(ABC):  # pylint: disable=too-few-public-methods
    """Checks a single endpoint."""

    @abstractmethod
    def probe(self, endpoint: Endpoint) -> EndpointReport:
        """
        Probe an endpoint once. Must never raise.

        Args:
            endpoint: Endpoint to check

        Returns:
            EndpointReport: Classified outcome
        """


class Notifier(ABC):  # pylint: disable=too-few-public-methods
    """Delivers a formatted report."""

    @abstractmethod
    def notify(self, destination_url: str, content: str) -> None:
        """
        Deliver content to the destination.

        Args:
            destination_url: Resolved webhook URL
            content: Report text

        Raises:
            DeliveryError: If delivery fails
        """
