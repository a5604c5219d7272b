"""
Report formatting - Turns probe results into the webhook message.
"""

from typing import Iterable

from endpoint_monitor.core.entities import EndpointReport


def format_line(report: EndpointReport) -> str:
    if report.healthy:
        return f"✅ {report.name} is healthy ({report.status})"
    return f"🔥 {report.name} did not respond normally ({report.status})"


def format_report(reports: Iterable[EndpointReport]) -> str:
    """
    Format probe results as one line per endpoint.

    Args:
        reports: Probe results in configuration order

    Returns:
        Lines joined by newlines, without a trailing newline. Empty string
        for no reports.
    """
    return "\n".join(format_line(report) for report in reports)
