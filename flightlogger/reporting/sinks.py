# flightlogger/reporting/sinks.py
"""
Report sinks: destinations for a finished FlightReport. Sinks are
best-effort; they log their own failures and never raise into the engine.
"""
import logging
import queue
import threading
from abc import ABC, abstractmethod
from typing import Optional

import requests

from ..engine.data_models import FlightReport
from .exceptions import ReportDeliveryError
from .formatting import build_webhook_message

logger = logging.getLogger(__name__)


class ReportSink(ABC):
    @abstractmethod
    def deliver(self, report: FlightReport) -> None:
        ...

    def close(self, timeout: Optional[float] = None) -> None:
        """Releases resources; flushes pending reports where applicable."""
        pass


class LoggingReportSink(ReportSink):
    """Writes the report to the log."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def deliver(self, report: FlightReport) -> None:
        self.log.info(
            f"Flight report: {report.pilot} ({report.aircraft_type}) "
            f"{report.departure_icao} -> {report.arrival_icao}, {report.duration_minutes} min, "
            f"V/S {report.vertical_speed_fpm:.1f} fpm, {report.g_force:.2f} G, {report.landing_quality.value}"
        )


class WebhookReportSink(ReportSink):
    """POSTs the report as a webhook embed."""

    def __init__(self, url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def deliver(self, report: FlightReport) -> None:
        try:
            self._post(build_webhook_message(report))
            logger.info("✅ Flight log sent")
        except ReportDeliveryError as e:
            logger.error(str(e))
        except Exception as e:
            logger.error(f"Webhook delivery failed: {e}", exc_info=True)

    def _post(self, message) -> None:
        try:
            response = self.session.post(self.url, json=message, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise ReportDeliveryError("webhook", message=f"Webhook delivery failed ({e})") from e

    def close(self, timeout: Optional[float] = None) -> None:
        self.session.close()


class BackgroundReportSink(ReportSink):
    """
    Hands reports to a worker thread so `deliver` returns immediately.
    The wrapped sink runs on the worker; its exceptions are logged.
    """
    _STOP = object()

    def __init__(self, inner: ReportSink):
        self.inner = inner
        self._queue: "queue.Queue" = queue.Queue()
        self._worker = threading.Thread(target=self._run, name="report-sink", daemon=True)
        self._worker.start()

    def deliver(self, report: FlightReport) -> None:
        self._queue.put(report)

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is self._STOP:
                    return
                self.inner.deliver(item)
            except Exception as e:
                logger.error(f"Report sink {type(self.inner).__name__} failed: {e}", exc_info=True)
            finally:
                self._queue.task_done()

    def flush(self) -> None:
        """Blocks until every queued report has been handled."""
        self._queue.join()

    def close(self, timeout: Optional[float] = None) -> None:
        self._queue.put(self._STOP)
        self._worker.join(timeout)
        self.inner.close(timeout)
