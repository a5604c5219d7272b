"""
Stdout notifier - Prints the report instead of delivering it.
"""

from endpoint_monitor.core.ports import Notifier


class AdapterStdoutNotifier(Notifier):  # pylint: disable=too-few-public-methods
    """Adapter that implements Notifier by printing to stdout (dry runs)."""

    def notify(self, destination_url: str, content: str) -> None:
        print()
        print("=" * 80)
        print("Endpoint health report")
        print("=" * 80)
        print(content if content else "No endpoints configured")
        print("=" * 80)
        print()
