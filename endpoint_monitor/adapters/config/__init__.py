"""
Config module - Configuration loading from a key-value document store.
"""

from endpoint_monitor.adapters.config.loader import (
    AdapterStoreConfigurationLoader,
    parse_configuration,
)

__all__ = ["AdapterStoreConfigurationLoader", "parse_configuration"]
