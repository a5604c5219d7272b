"""
Endpoint monitor - Scheduled HTTP health checks reported to a chat webhook.
"""

from endpoint_monitor.application.health_check_use_case import HealthCheckUseCase
from endpoint_monitor.application.report import format_report

__all__ = ["HealthCheckUseCase", "format_report"]
