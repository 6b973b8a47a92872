#!/usr/bin/env python3
# examples/E010_replay_flight.py

"""
Replays a synthetic Taoyuan -> Haneda flight through the command line logger.
Writes a tiny airport file and a JSONL telemetry track to a temp directory.
"""
import json
import os
import sys
import tempfile
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from flightlogger.cli import main
from flightlogger.engine.data_models import TelemetrySample
from flightlogger.telemetry import save_samples_jsonl

AIRPORTS = {
    "RCTP": {"lat": 25.0797, "lon": 121.2342, "tz": "Asia/Taipei"},
    "RCSS": {"lat": 25.0694, "lon": 121.5524, "tz": "Asia/Taipei"},
    "RJTT": {"lat": 35.5523, "lon": 139.7798, "tz": "Asia/Tokyo"},
}

def build_track():
    track = []
    # Taxi and takeoff roll
    for _ in range(5):
        track.append(TelemetrySample((25.0777, 121.2328), 33.0, True, 0.0, 20.0, 20.0, 9.8, 33.0))
    # Climb out, a telemetry gap, cruise
    for i in range(1, 6):
        track.append(TelemetrySample((25.08 + i * 0.01, 121.24 + i * 0.02), 33.0 + i * 150.0, False, 1800.0, 170.0, 175.0, 10.1, 33.0))
    track.append(None)
    for i in range(20):
        track.append(TelemetrySample((30.0, 130.0), 11000.0, False, 0.0, 480.0, 470.0, 9.8, 0.0))
    # Touchdown at Haneda
    track.append(TelemetrySample((35.55, 139.78), 6.0, True, -140.0, 138.0, 141.0, 12.3, 6.0))
    return track

def run():
    with tempfile.TemporaryDirectory() as tmpdir:
        airports_path = os.path.join(tmpdir, "airports.json")
        track_path = os.path.join(tmpdir, "flight.jsonl")
        with open(airports_path, 'w') as f:
            json.dump(AIRPORTS, f)
        save_samples_jsonl(track_path, build_track())

        return main([
            "--pilot", "EVA123", "--aircraft", "B77W",
            "--airports-file", airports_path,
            "--replay", track_path,
            "--session-dir", os.path.join(tmpdir, "session"),
            "--no-prompt",
        ])

if __name__ == "__main__":
    sys.exit(run())
