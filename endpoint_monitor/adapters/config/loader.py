"""
Configuration loader - Loads and validates the run configuration.

The configuration document is read from the key-value store at
collection "functions", key "config" by default.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from endpoint_monitor.adapters.config import store
from endpoint_monitor.core.entities import Configuration, Endpoint
from endpoint_monitor.core.exceptions import ConfigurationError
from endpoint_monitor.core.ports import ConfigurationLoader

logger = logging.getLogger(__name__)


# Configuration document structure
# {
#   "endpoints": [{"name": str, "url": str}, ...],
#   "webhook_url": str,  # may contain $DISCORD_WEBHOOK_ID / $DISCORD_WEBHOOK_TOKEN
# }

DEFAULT_COLLECTION = "functions"
DEFAULT_KEY = "config"


class AdapterStoreConfigurationLoader(ConfigurationLoader):  # pylint: disable=too-few-public-methods
    """
    Adapter that implements ConfigurationLoader on top of the JSON file store.
    """

    def __init__(
        self,
        store_path: Optional[Union[str, Path]] = None,
        collection: str = DEFAULT_COLLECTION,
        key: str = DEFAULT_KEY,
    ):
        """
        Initialize the loader.

        Args:
            store_path: Path to the store file (default: configs/store.json)
            collection: Collection holding the configuration document
            key: Key of the configuration document
        """
        self.store_path = store_path
        self.collection = collection
        self.key = key

    def load(self) -> Configuration:
        document = store.get_document(self.collection, self.key, self.store_path)
        if document is None:
            raise ConfigurationError(
                f"No configuration document at {self.collection}/{self.key}"
            )

        configuration = parse_configuration(document)
        logger.info(
            "Loaded configuration: %d endpoints from %s/%s",
            len(configuration.endpoints),
            self.collection,
            self.key,
        )
        return configuration


def parse_configuration(document: Any) -> Configuration:
    """
    Validate a raw configuration document.

    Args:
        document: Decoded JSON document

    Returns:
        Configuration with endpoints in document order

    Raises:
        ConfigurationError: If the document is malformed
    """
    if not isinstance(document, dict):
        raise ConfigurationError("Configuration document must be an object")

    if "endpoints" not in document:
        raise ConfigurationError("Missing required field 'endpoints'")
    raw_endpoints = document["endpoints"]
    if not isinstance(raw_endpoints, list):
        raise ConfigurationError("Field 'endpoints' must be a list")

    webhook_url = document.get("webhook_url")
    if not isinstance(webhook_url, str) or not webhook_url.strip():
        raise ConfigurationError("Field 'webhook_url' must be a non-empty string")

    endpoints: List[Endpoint] = [
        _parse_endpoint(index, raw) for index, raw in enumerate(raw_endpoints, start=1)
    ]

    return Configuration(endpoints=tuple(endpoints), webhook_url=webhook_url)


def _parse_endpoint(index: int, raw: Any) -> Endpoint:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Endpoint #{index} must be an object")

    for field in ("name", "url"):
        if field not in raw:
            raise ConfigurationError(
                f"Missing required field '{field}' for endpoint #{index}"
            )
        if not isinstance(raw[field], str) or not raw[field].strip():
            raise ConfigurationError(
                f"Field '{field}' must be a non-empty string for endpoint #{index}"
            )

    return Endpoint(name=raw["name"], url=raw["url"])
