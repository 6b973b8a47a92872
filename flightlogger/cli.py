#!/usr/bin/env python3
"""
Command line flight logger.

Connects to FlightGear (or replays a recorded JSONL telemetry file), waits for
takeoff, and reports the flight once it lands or crashes.
"""
import argparse
import logging
import sys
from typing import List, Optional

from .airports import AirportLoader, GeoIndex, load_airport_file
from .constants.connection import FGConnectionConstants
from .engine import EngineConfig, FlightPhaseEngine
from .fg_interface import FGConnection
from .reporting import BackgroundReportSink, LoggingReportSink, ReportSink, WebhookReportSink
from .session import JsonFileSessionStore
from .telemetry import FlightGearTelemetrySource, ScriptedTelemetrySource, load_samples_jsonl

logger = logging.getLogger(__name__)


def prompt_for_icao(context: str, lat: float, lon: float) -> Optional[str]:
    """Asks the pilot for an ICAO code when no airport lies inside the geofence."""
    try:
        return input(f"No airport found near ({lat:.4f}, {lon:.4f}). Enter {context} ICAO (blank = UNKNOWN): ")
    except EOFError:
        return None


class ReplayClock:
    """Simulated wall clock that advances one poll interval per sleep."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.now += seconds


class CompositeReportSink(ReportSink):
    def __init__(self, sinks: List[ReportSink]):
        self.sinks = sinks

    def deliver(self, report) -> None:
        for sink in self.sinks:
            sink.deliver(report)

    def close(self, timeout: Optional[float] = None) -> None:
        for sink in self.sinks:
            sink.close(timeout)


def build_parser() -> argparse.ArgumentParser:
    defaults = EngineConfig()
    parser = argparse.ArgumentParser(description="Detect takeoff and landing from simulator telemetry and report the flight.")
    parser.add_argument("--pilot", default="", help="Callsign shown in the report")
    parser.add_argument("--aircraft", default="", help="Aircraft type (A320, B737, ...)")
    parser.add_argument("--resume", action="store_true", help="Resume the last unfinished flight")

    data = parser.add_argument_group("airport data")
    data.add_argument("--airports-url", default=AirportLoader.DEFAULT_URL, help="URL of the ICAO -> {lat, lon, tz} JSON")
    data.add_argument("--airports-file", help="Read the airport JSON from a local file instead")
    data.add_argument("--geofence-km", type=float, default=defaults.geofence_km)

    thresholds = parser.add_argument_group("thresholds")
    thresholds.add_argument("--takeoff-agl-ft", type=float, default=defaults.takeoff_agl_ft)
    thresholds.add_argument("--crash-fpm", type=float, default=defaults.crash_fpm)
    thresholds.add_argument("--butter-fpm", type=float, default=defaults.butter_fpm)

    io = parser.add_argument_group("input/output")
    io.add_argument("--host", default=FGConnectionConstants.DEFAULT_HOST)
    io.add_argument("--port", type=int, default=FGConnectionConstants.DEFAULT_PORT)
    io.add_argument("--replay", help="JSONL telemetry file to replay instead of connecting to FlightGear")
    io.add_argument("--session-dir", default=JsonFileSessionStore.DEFAULT_DIR)
    io.add_argument("--webhook-url", help="Webhook receiving the flight report embed")
    io.add_argument("--no-prompt", action="store_true", help="Never ask for ICAO codes interactively")
    io.add_argument("-v", "--verbose", action="store_true")
    return parser


def build_engine(args: argparse.Namespace) -> FlightPhaseEngine:
    config = EngineConfig(
        takeoff_agl_ft=args.takeoff_agl_ft,
        butter_fpm=args.butter_fpm,
        crash_fpm=args.crash_fpm,
        geofence_km=args.geofence_km,
    )

    geo_index = GeoIndex(geofence_km=config.geofence_km, radius_km=config.earth_radius_km)
    if args.airports_file:
        geo_index.load(load_airport_file(args.airports_file))
    else:
        geo_index.load(AirportLoader(url=args.airports_url).load())

    sinks: List[ReportSink] = [LoggingReportSink()]
    if args.webhook_url:
        sinks.append(WebhookReportSink(args.webhook_url))
    report_sink = BackgroundReportSink(CompositeReportSink(sinks))

    clock_kwargs = {}
    if args.replay:
        telemetry = ScriptedTelemetrySource(load_samples_jsonl(args.replay))
        replay_clock = ReplayClock()
        clock_kwargs = {"clock": replay_clock, "sleep": replay_clock.sleep}
    else:
        telemetry = FlightGearTelemetrySource(FGConnection(args.host, args.port))

    return FlightPhaseEngine(
        telemetry=telemetry,
        geo_index=geo_index,
        session_store=JsonFileSessionStore(args.session_dir),
        report_sink=report_sink,
        config=config,
        manual_resolver=None if args.no_prompt else prompt_for_icao,
        **clock_kwargs
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    engine = build_engine(args)
    if not (args.resume and engine.resume()):
        engine.start_session(args.pilot, args.aircraft)
    logger.info("Flight logger running. Start your flight when ready (Ctrl+C to stop).")

    try:
        if args.replay:
            while engine.is_running and not engine.telemetry.exhausted:
                engine.poll()
                engine.sleep(engine.config.poll_interval_s)
        else:
            engine.run()
    except KeyboardInterrupt:
        logger.info("Monitoring stopped.")
        engine.stop()
    finally:
        engine.report_sink.close(timeout=15.0)

    return 0 if engine.last_report else 1


if __name__ == "__main__":
    sys.exit(main())
