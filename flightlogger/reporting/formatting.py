# flightlogger/reporting/formatting.py
"""
Turns a FlightReport into a Discord-style webhook embed. Takeoff and landing
times are shown in the local time of the departure/arrival airport when its
time zone is known, UTC otherwise.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..engine.data_models import FlightReport, LandingQuality

logger = logging.getLogger(__name__)

QUALITY_COLORS = {
    LandingQuality.BUTTER: 0x00FF00,
    LandingQuality.HARD: 0xFF8000,
    LandingQuality.CRASH: 0xFF0000,
}
DEFAULT_COLOR = 0x0099FF
FOOTER_TEXT = "Flight Logger"


def format_time_with_timezone(timestamp: float, tz_name: Optional[str] = None) -> str:
    """'16 Aug 2025, 14:05 CST' style string; falls back to UTC."""
    tz = timezone.utc
    if tz_name:
        try:
            tz = ZoneInfo(str(tz_name))
        except (ZoneInfoNotFoundError, ValueError):
            logger.debug(f"Unknown time zone {tz_name!r}, using UTC")
    moment = datetime.fromtimestamp(timestamp, tz)
    suffix = moment.tzname() or "UTC"
    return f"{moment.strftime('%d %b %Y, %H:%M')} {suffix}"


def _fmt(value: Optional[float], digits: int) -> str:
    return "N/A" if value is None else f"{value:.{digits}f}"


def build_webhook_message(report: FlightReport) -> Dict[str, Any]:
    takeoff_time = format_time_with_timezone(report.takeoff_at, report.departure_timezone)
    landing_time = format_time_with_timezone(report.landing_at, report.arrival_timezone)

    return {
        "embeds": [{
            "title": "🛫 Flight Report",
            "color": QUALITY_COLORS.get(report.landing_quality, DEFAULT_COLOR),
            "fields": [
                {
                    "name": "✈️ Flight Information",
                    "value": f"**Pilot**: {report.pilot}\n**Aircraft**: {report.aircraft_type}",
                    "inline": False
                },
                {
                    "name": "📍 Route",
                    "value": f"**Departure**: {report.departure_icao}\n**Arrival**: {report.arrival_icao}",
                    "inline": True
                },
                {
                    "name": "⏱️ Duration",
                    "value": f"**Flight Time**: {report.duration_minutes} mins",
                    "inline": True
                },
                {
                    "name": "📊 Flight Data",
                    "value": (
                        f"**V/S**: {_fmt(report.vertical_speed_fpm, 1)} fpm\n"
                        f"**G-Force**: {_fmt(report.g_force, 2)}\n"
                        f"**TAS**: {_fmt(report.true_airspeed_kt, 1)} kts\n"
                        f"**GS**: {_fmt(report.ground_speed_kt, 1)} kts"
                    ),
                    "inline": True
                },
                {
                    "name": "🏁 Landing Quality",
                    "value": f"**{report.landing_quality.value}**",
                    "inline": True
                },
                {
                    "name": "🕓 Times",
                    "value": f"**Takeoff**: {takeoff_time}\n**Landing**: {landing_time}",
                    "inline": False
                }
            ],
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "footer": {"text": FOOTER_TEXT}
        }]
    }
