"""
HTTP prober - Checks an endpoint with a single GET request.

Every failure is turned into an unhealthy report; nothing is raised
to the caller.
"""

import logging
from typing import Optional

import requests  # type: ignore

from endpoint_monitor.core.entities import UNKNOWN_STATUS, Endpoint, EndpointReport
from endpoint_monitor.core.ports import Prober

logger = logging.getLogger(__name__)


class AdapterHttpProber(Prober):  # pylint: disable=too-few-public-methods
    """
    Adapter that implements Prober using requests.

    A response that passes raise_for_status() is healthy. HTTP errors,
    network errors and timeouts are unhealthy; the status code is read
    from the error's response when there is one, otherwise UNKNOWN_STATUS.
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Initialize the prober.

        Args:
            timeout: Request timeout in seconds. None keeps the transport
                     default (no timeout).
        """
        self.timeout = timeout

    def probe(self, endpoint: Endpoint) -> EndpointReport:
        try:
            response = requests.get(endpoint.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            status = _status_from_error(e)
            logger.warning(
                "Probe failed for %s (%s): %s", endpoint.name, endpoint.url, e
            )
            return EndpointReport.for_endpoint(endpoint, status, healthy=False)
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "Unexpected error probing %s (%s): %s",
                endpoint.name,
                endpoint.url,
                e,
                exc_info=True,
            )
            return EndpointReport.for_endpoint(
                endpoint, UNKNOWN_STATUS, healthy=False
            )

        logger.debug(
            "Probe to %s returned %s", endpoint.url, response.status_code
        )
        return EndpointReport.for_endpoint(
            endpoint, response.status_code, healthy=True
        )


def _status_from_error(error: requests.exceptions.RequestException) -> int:
    # Connection errors and timeouts carry no response
    response = getattr(error, "response", None)
    if response is None:
        return UNKNOWN_STATUS
    status = getattr(response, "status_code", None)
    return status if isinstance(status, int) else UNKNOWN_STATUS
