"""
backend.tss — Time Series Smoothing
====================================

Streaming one-step-ahead forecaster built on double exponential smoothing
in 32-bit integer arithmetic, with a time-based warm-up reset.

Architecture:
    observation source (file / HTTP)
                ↓
          ExpSmoother.absorb()
            1. Saturation clamp
            2. Staleness check (reset_time)
            3. Warm-up average  or  double exponential smoothing
                ↓
          forecast → reports (console table / comma delimited file / JSON)

Modules:
    config    — Defaults, 32-bit bounds, settings validation
    utils     — Integer helpers and logging setup
    smoother  — The smoothing state machine
    reader    — Observation file loading and cleaning
    report    — Console and comma delimited reports
    runner    — Feeds observations through the smoother
    cli       — Command-line driver
    service   — Flask HTTP driver
"""

__version__ = "1.0.0"
