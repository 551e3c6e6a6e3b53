"""Flask application factory for the simulator's JSON API.

The ``create_app`` function returns a Flask app with two endpoints:

- ``POST /api/simulate`` — run a simulation and return its events,
  swap records, and statistics as JSON.
- ``GET /api/status`` — report the service name and version.
"""

from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify, request

from fifo_vm import __version__
from fifo_vm.config import SimulationConfig
from fifo_vm.engine import ReplacementEngine
from fifo_vm.errors import SimulationError
from fifo_vm.events import SimulationResult, StepEvent
from fifo_vm.logging import Logger, LogLevel
from fifo_vm.report import format_event
from fifo_vm.swaplog import MemorySwapLog

_HTTP_BAD_REQUEST = 400
_MAX_LOG_ENTRIES = 1000


def _event_to_dict(event: StepEvent, warnings: list[str]) -> dict[str, Any]:
    data: dict[str, Any] = {
        "step": event.step,
        "page": event.page,
        "frame": event.frame,
        "kind": str(event.kind),
        "text": format_event(event),
    }
    victim = getattr(event, "victim_page", None)
    if victim is not None:
        data["victim_page"] = victim
    if warnings:
        data["warnings"] = warnings
    return data


def _result_to_dict(
    result: SimulationResult, swap_log: MemorySwapLog, logger: Logger
) -> dict[str, Any]:
    by_step: dict[int, list[str]] = {}
    for entry in logger.entries:
        by_step.setdefault(entry.step, []).append(str(entry))
    return {
        "references": result.references,
        "page_faults": result.page_faults,
        "swaps_out": result.swaps_out,
        "hits": result.hits,
        "fault_rate": result.fault_rate,
        "occupancy": list(result.occupancy),
        "events": [_event_to_dict(e, by_step.get(e.step, [])) for e in result.events],
        "swap_log": swap_log.lines(),
        "warnings": [str(e) for e in logger.entries],
    }


def create_app() -> Flask:
    """Create and configure the Flask application.

    Returns:
        A configured Flask application ready to serve.

    """
    app = Flask(__name__)

    @app.route("/api/simulate", methods=["POST"])
    def simulate() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run one simulation.

        Expects JSON body: ``{"frames": 3, "pages": 5, "references": [0, 1, 2]}``

        Returns:
            JSON with statistics, per-step events, and the swap log.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), _HTTP_BAD_REQUEST

        try:
            config = SimulationConfig.from_mapping(data)
            swap_log = MemorySwapLog()
            logger = Logger(min_level=LogLevel.WARNING, capacity=_MAX_LOG_ENTRIES)
            engine = ReplacementEngine(
                num_frames=config.num_frames,
                num_pages=config.num_pages,
                swap_sink=swap_log,
                logger=logger,
            )
            result = engine.run(config.references)
        except SimulationError as exc:
            return jsonify({"error": str(exc)}), _HTTP_BAD_REQUEST

        return jsonify(_result_to_dict(result, swap_log, logger))

    @app.route("/api/status")
    def status() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the service name and version."""
        return jsonify({"name": "fifo-vm", "version": __version__, "policy": "fifo"})

    return app


def main() -> None:
    """Run the web API development server.

    This is the ``fifo-vm-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
