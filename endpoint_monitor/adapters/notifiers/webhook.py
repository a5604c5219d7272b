"""
Webhook notifier - Posts the report to a Discord-style webhook.
"""

import logging

import requests  # type: ignore

from endpoint_monitor.core.exceptions import DeliveryError
from endpoint_monitor.core.ports import Notifier

logger = logging.getLogger(__name__)


class AdapterWebhookNotifier(Notifier):  # pylint: disable=too-few-public-methods
    """
    Adapter that implements Notifier by POSTing {"content": ...} as JSON.

    One attempt per call. Any transport failure or non-success status
    is raised as DeliveryError.
    """

    def __init__(self, timeout: float = 10):
        """
        Initialize the notifier.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout

    def notify(self, destination_url: str, content: str) -> None:
        payload = {"content": content}

        try:
            response = requests.post(
                destination_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise DeliveryError(f"Failed to send webhook notification: {e}") from e

        logger.info(
            "Sent webhook notification (%d lines, status %s)",
            len(content.splitlines()),
            response.status_code,
        )
