"""
Notifiers module - Notifier port implementations.

This module contains adapters that deliver the formatted report,
either to a chat webhook or to stdout for dry runs.
"""

from endpoint_monitor.adapters.notifiers.stdout import AdapterStdoutNotifier
from endpoint_monitor.adapters.notifiers.webhook import AdapterWebhookNotifier

__all__ = ["AdapterStdoutNotifier", "AdapterWebhookNotifier"]
