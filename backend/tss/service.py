"""
service.py — Smoother HTTP Service (Flask)
===========================================

Lightweight HTTP front end that feeds a single series of observations
into one session smoother.  The smoother is configured once at start-up
from config (n_alpha, reset_time) and lives until the process exits.

Endpoints:
    POST /observe    — Absorb one observation, return the forecast
    GET  /status     — Current smoother state
    GET  /health     — Service health check

Run:
    python -m backend.tss.service
    # Starts on port 5050 by default (configurable via TSS_SERVICE_PORT)
"""

import logging
import threading

from flask import Flask, request, jsonify

from . import config
from .smoother import ExpSmoother
from .utils import setup_logging

logger = logging.getLogger("tss.service")


def _as_int(value):
    """Accept JSON integers only (bool is an int subclass, reject it)."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def create_app(smoother: ExpSmoother = None) -> Flask:
    """
    Build the Flask app around a session smoother.

    Args:
        smoother: Smoother to serve. Defaults to one built from config.
    """
    app = Flask(__name__)
    app.config["SMOOTHER"] = smoother or ExpSmoother()
    # Request threads share the smoother; every access holds this lock
    lock = threading.Lock()
    logger.info(
        f"Session smoother ready: n_alpha={app.config['SMOOTHER'].n_alpha} "
        f"reset_time={app.config['SMOOTHER'].reset_time}"
    )

    @app.route("/health", methods=["GET"])
    def health():
        """Health check endpoint."""
        return jsonify({
            "status": "OK",
            "service": "Time Series Smoother",
        })

    @app.route("/observe", methods=["POST"])
    def observe():
        """
        Absorb one observation.

        Expects JSON body:
            { observe: int, count: int (optional), timestamp: int (optional) }

        ``timestamp`` is in seconds since epoch; the server clock is used
        when it is absent.
        """
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "No JSON body provided"}), 400

        xt = _as_int(data.get("observe"))
        if xt is None:
            return jsonify({"error": "'observe' must be an integer"}), 400

        now = None
        if data.get("timestamp") is not None:
            now = _as_int(data["timestamp"])
            if now is None:
                return jsonify({"error": "'timestamp' must be an integer"}), 400

        smoother = app.config["SMOOTHER"]
        with lock:
            if now is None:
                now = smoother.now()
            if smoother.n and smoother.is_stale(now):
                logger.info("Observation after reset interval, "
                            "restarting warm-up")
            ft = smoother.absorb(xt, now)
            mode = smoother.mode
            state = smoother.snapshot()
        logger.debug(f"Observation count={data.get('count')} xt={xt} -> ft={ft}")

        return jsonify({
            "status": "processed",
            "count": data.get("count"),
            "forecast": ft,
            "mode": mode,
            "state": state,
        })

    @app.route("/status", methods=["GET"])
    def status():
        """Current smoother state."""
        smoother = app.config["SMOOTHER"]
        with lock:
            mode = smoother.mode
            state = smoother.snapshot()
        return jsonify({
            "mode": mode,
            "state": state,
        })

    return app


if __name__ == "__main__":
    setup_logging()
    app = create_app()
    logger.info(f"Starting smoother service on port {config.SERVICE_PORT}")
    app.run(host=config.SERVICE_HOST, port=config.SERVICE_PORT, debug=False)
