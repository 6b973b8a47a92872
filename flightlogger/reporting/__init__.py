"""
flightlogger.reporting - destinations for finished flight reports.
"""

from .sinks import ReportSink, LoggingReportSink, WebhookReportSink, BackgroundReportSink
from .formatting import build_webhook_message, format_time_with_timezone, QUALITY_COLORS
from .exceptions import ReportDeliveryError

__all__ = [
    "ReportSink",
    "LoggingReportSink",
    "WebhookReportSink",
    "BackgroundReportSink",
    "build_webhook_message",
    "format_time_with_timezone",
    "QUALITY_COLORS",
    "ReportDeliveryError",
]
