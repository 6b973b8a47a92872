#!/usr/bin/env python3
"""
Flight phase engine.

Lifecycle: construct -> start_session() or resume() -> poll() once per second
-> REPORTED. Each poll takes one telemetry sample and evaluates:

    IDLE     -> AIRBORNE  airborne and more than `takeoff_agl_ft` above terrain
    AIRBORNE -> REPORTED  first ground contact at least `debounce_s` after takeoff

Every phase change is written through to the session store; the store is
cleared once the report has been handed to the sink.
"""
import logging
import math
import time
from typing import Callable, Optional

from ..airports.data_models import Airport, Resolution, UNRESOLVED_AIRPORT, CRASH_SITE
from ..airports.geo_index import GeoIndex
from ..session.data_models import PersistedSessionRecord
from ..session.store import SessionStore
from .classification import is_takeoff, classify_landing, g_force, duration_minutes
from .config import EngineConfig, FlightLoggerConstants
from .data_models import FlightPhase, FlightSession, FlightReport, LandingQuality, TelemetrySample
from .exceptions import SessionStateError, TelemetryUnavailable

logger = logging.getLogger(__name__)

# (context, lat, lon) -> ICAO code; context is "departure" or "arrival"
ManualResolver = Callable[[str, float, float], Optional[str]]


class FlightPhaseEngine:
    """Polling state machine turning telemetry into one FlightReport per flight."""

    def __init__(self, telemetry, geo_index: GeoIndex, session_store: SessionStore, report_sink,
                 config: Optional[EngineConfig] = None,
                 manual_resolver: Optional[ManualResolver] = None,
                 clock: Callable[[], float] = time.time,
                 sleep: Callable[[float], None] = time.sleep):
        """
        Args:
            telemetry: object with sample() -> TelemetrySample | None
            geo_index: loaded GeoIndex used for departure/arrival lookup
            session_store: persistence for the resumable session
            report_sink: object with deliver(FlightReport). Called on the polling
                thread; wrap slow sinks (webhooks) in BackgroundReportSink so the
                landing tick does not wait on delivery.
            manual_resolver: asked for an ICAO when no airport is inside the geofence
            clock, sleep: injectable time functions
        """
        self.telemetry = telemetry
        self.geo_index = geo_index
        self.session_store = session_store
        self.report_sink = report_sink
        self.config = config or EngineConfig()
        self.manual_resolver = manual_resolver
        self.clock = clock
        self.sleep = sleep

        self.session: Optional[FlightSession] = None
        self.last_report: Optional[FlightReport] = None
        self._running = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def phase(self) -> FlightPhase:
        return self.session.phase if self.session else FlightPhase.IDLE

    @property
    def is_running(self) -> bool:
        return self._running

    def start_session(self, pilot: str = "", aircraft_type: str = "") -> FlightSession:
        """Arms the logger for a new flight. Not allowed while a flight is in progress."""
        if self.phase is FlightPhase.AIRBORNE:
            raise SessionStateError("start_session", self.phase.name)
        self.session = FlightSession(
            pilot=pilot.strip() or FlightLoggerConstants.DEFAULT_PILOT,
            aircraft_type=aircraft_type.strip() or FlightLoggerConstants.DEFAULT_AIRCRAFT,
        )
        self.last_report = None
        self._running = True
        logger.info(f"Flight logger armed for {self.session.pilot} ({self.session.aircraft_type}).")
        return self.session

    def resume(self) -> bool:
        """Rebuilds an AIRBORNE session from the store. False if there is nothing to resume."""
        if self.phase is FlightPhase.AIRBORNE:
            raise SessionStateError("resume", self.phase.name)
        record = self.session_store.load()
        if record is None or record.phase != FlightPhase.AIRBORNE.name or record.landed:
            logger.info("❌ No previous session found.")
            return False

        self.session = FlightSession(
            pilot=record.pilot or FlightLoggerConstants.DEFAULT_PILOT,
            aircraft_type=record.aircraft_type or FlightLoggerConstants.DEFAULT_AIRCRAFT,
            phase=FlightPhase.AIRBORNE,
            started_at=record.started_at,
            departure=record.departure or UNRESOLVED_AIRPORT,
        )
        self.last_report = None
        self._running = True
        logger.info(f"🔁 Resumed flight session from {self.session.departure.icao}.")
        return True

    def stop(self) -> None:
        """Ends polling. A report is only guaranteed if stop() is not racing a tick."""
        self._running = False

    def run(self, max_ticks: Optional[int] = None) -> Optional[FlightReport]:
        """Polls on the configured cadence until REPORTED, stop() or max_ticks."""
        ticks = 0
        while self._running and (max_ticks is None or ticks < max_ticks):
            self.poll()
            ticks += 1
            if self._running:
                self.sleep(self.config.poll_interval_s)
        return self.last_report

    # ------------------------------------------------------------------
    # Polling
    # ------------------------------------------------------------------

    def poll(self) -> Optional[FlightReport]:
        """Evaluates one tick. Returns the report on the tick that lands the flight."""
        if not self._running or self.session is None:
            return None

        sample = self._take_sample()
        if sample is None:
            return None

        now = self.clock()
        if self.session.phase is FlightPhase.IDLE:
            if is_takeoff(sample, self.config):
                self._on_takeoff(sample, now)
            return None

        if self.session.phase is FlightPhase.AIRBORNE and sample.on_ground:
            if self.session.started_at is None:
                logger.warning("Airborne session has no takeoff time; skipping tick.")
                return None
            if now - self.session.started_at < self.config.debounce_s:
                return None
            return self._on_landing(sample, now)

        return None

    def _take_sample(self) -> Optional[TelemetrySample]:
        try:
            sample = self.telemetry.sample()
        except TelemetryUnavailable as e:
            logger.debug(str(e))
            return None
        if sample is None:
            return None
        if not math.isfinite(sample.vertical_speed_fpm):
            logger.debug("Discarding sample with non-finite vertical speed.")
            return None
        return sample

    def _on_takeoff(self, sample: TelemetrySample, now: float) -> None:
        session = self.session
        session.started_at = now
        session.departure = self._resolve_airport("departure", sample)
        session.advance(FlightPhase.AIRBORNE)
        self._persist()
        logger.info(f"🛫 Departure detected at {session.departure.icao}")

    def _on_landing(self, sample: TelemetrySample, now: float) -> FlightReport:
        session = self.session
        quality = classify_landing(sample.vertical_speed_fpm, self.config)
        if quality is LandingQuality.CRASH:
            logger.warning("⚠️ CRASH DETECTED: logging crash report.")
            session.arrival = CRASH_SITE
        else:
            session.arrival = self._resolve_airport("arrival", sample)
        session.mark_grounded(now)
        logger.info(f"🛬 Arrival detected at {session.arrival.icao}")

        report = self._build_report(sample, quality)
        self.last_report = report
        try:
            self.report_sink.deliver(report)
        except Exception as e:
            # The landing stands whatever happens to delivery
            logger.error(f"Report delivery failed: {e}", exc_info=True)

        self.session_store.clear()
        session.advance(FlightPhase.REPORTED)
        self._running = False
        return report

    def _build_report(self, sample: TelemetrySample, quality: LandingQuality) -> FlightReport:
        session = self.session
        departure = session.departure or UNRESOLVED_AIRPORT
        tas = sample.true_airspeed_kt
        return FlightReport(
            pilot=session.pilot,
            aircraft_type=session.aircraft_type,
            departure_icao=departure.icao,
            arrival_icao=session.arrival.icao,
            takeoff_at=session.started_at,
            landing_at=session.grounded_at,
            duration_minutes=duration_minutes(session.started_at, session.grounded_at),
            vertical_speed_fpm=round(sample.vertical_speed_fpm, 1),
            g_force=round(g_force(sample.vertical_accel_raw, self.config.standard_gravity), 2),
            ground_speed_kt=round(sample.ground_speed_kt, 1),
            true_airspeed_kt=None if tas is None or not math.isfinite(tas) else round(tas, 1),
            landing_quality=quality,
            departure_timezone=departure.timezone,
            arrival_timezone=session.arrival.timezone,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_airport(self, context: str, sample: TelemetrySample) -> Airport:
        airport, distance = self.geo_index.nearest_with_distance(sample.lat, sample.lon)
        if airport.is_resolved:
            logger.debug(f"{context}: {airport.icao} at {distance:.1f} km")
            return airport
        return self._resolve_manually(context, sample.lat, sample.lon)

    def _resolve_manually(self, context: str, lat: float, lon: float) -> Airport:
        if self.manual_resolver is None:
            return UNRESOLVED_AIRPORT
        try:
            answer = self.manual_resolver(context, lat, lon)
        except Exception as e:
            logger.error(f"Manual {context} resolution failed: {e}")
            return UNRESOLVED_AIRPORT
        icao = (answer or "").strip().upper()
        if not icao:
            return UNRESOLVED_AIRPORT
        known = self.geo_index.lookup(icao)
        return Airport(
            icao=icao, lat=lat, lon=lon,
            timezone=known.timezone if known else None,
            resolution=Resolution.MANUAL,
        )

    def _persist(self) -> None:
        session = self.session
        self.session_store.save(PersistedSessionRecord(
            phase=session.phase.name,
            started_at=session.started_at,
            departure=session.departure,
            pilot=session.pilot,
            aircraft_type=session.aircraft_type,
            landed=session.grounded_at is not None,
            saved_at=self.clock(),
        ))
