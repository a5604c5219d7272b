"""
Config store - JSON file backed key-value document store.

This module reads configuration documents organised by collection and key.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from endpoint_monitor.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


# Store file structure
# {
#   "collection": {
#     "key": Any,  # JSON object, or a JSON document encoded as a string
#   }
# }

DEFAULT_STORE_PATH = Path("configs") / "store.json"


def load_store(store_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load the whole store from its JSON file.

    Args:
        store_path: Path to the store file. If None, uses configs/store.json

    Returns:
        Dict with collection -> {key -> document} mappings, or an empty
        dict if the file does not exist

    Raises:
        ConfigurationError: If the file cannot be read or is not valid JSON
    """
    store_file = Path(store_path) if store_path else DEFAULT_STORE_PATH

    if not store_file.exists():
        logger.warning("Store file not found: %s", store_file)
        return {}

    try:
        with open(store_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise ConfigurationError(f"Invalid JSON in store file {store_file}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Could not read store file {store_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Store file must contain an object: {store_file}")

    logger.debug("Loaded %d collections from %s", len(data), store_file)
    return data


def get_document(
    collection: str, key: str, store_path: Optional[Union[str, Path]] = None
) -> Optional[Any]:
    """
    Get one document from the store.

    Args:
        collection: Collection name
        key: Document key within the collection
        store_path: Path to the store file

    Returns:
        Decoded document, or None if the collection or key is absent

    Raises:
        ConfigurationError: If the store or the document is not valid JSON
    """
    documents = load_store(store_path).get(collection)
    if not isinstance(documents, dict):
        logger.debug("Collection not found: %s", collection)
        return None

    document = documents.get(key)
    if isinstance(document, str):
        try:
            document = json.loads(document)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid JSON document at {collection}/{key}: {e}"
            ) from e

    return document
