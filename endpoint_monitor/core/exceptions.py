"""
Core exceptions - Failures that abort a health check run.
"""


class EndpointMonitorError(Exception):
    """Base class for run-level failures."""


class ConfigurationError(EndpointMonitorError, ValueError):
    """Configuration is unavailable, malformed or incomplete."""


class DeliveryError(EndpointMonitorError):
    """The report could not be delivered to the webhook."""
