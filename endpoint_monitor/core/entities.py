"""
Core entities - Plain data carried through the health check pipeline.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

# Status reported when a probe failed without any HTTP response
UNKNOWN_STATUS = 0


@dataclass(frozen=True)
class Endpoint:
    """A named URL to be health-checked."""

    name: str
    url: str


@dataclass(frozen=True)
class Configuration:
    """
    Configuration loaded at the start of every run.

    Attributes:
        endpoints: Endpoints to probe, in report order
        webhook_url: Destination URL template with placeholder tokens
    """

    endpoints: Tuple[Endpoint, ...]
    webhook_url: str


@dataclass(frozen=True)
class EndpointReport:
    """Outcome of one probe."""

    name: str
    url: str
    status: int
    healthy: bool

    @classmethod
    def for_endpoint(
        cls, endpoint: Endpoint, status: int, healthy: bool
    ) -> "EndpointReport":
        return cls(
            name=endpoint.name, url=endpoint.url, status=status, healthy=healthy
        )


@dataclass(frozen=True)
class WebhookCredentials:
    """Values substituted into the webhook URL template."""

    webhook_id: Optional[str] = None
    webhook_token: Optional[str] = None
