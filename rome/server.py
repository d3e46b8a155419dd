"""
HTTP Microservice
=================
Flask-based HTTP API for the roman numeral parser.

Endpoints:
    POST   /api/parse             → Parse {"numeral": "..."}
    GET    /api/parse/<numeral>   → Parse a numeral from the path
    POST   /api/batch             → Parse {"numerals": [...]}
    GET    /api/render/<value>    → Canonical numeral for an integer
    GET    /api/health            → Health check
    GET    /api/info              → Parser version info
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

from . import __version__
from .digits import int_to_roman
from .engine import ParserConfig, ParserEngine
from .models import ParseResult

logger = logging.getLogger(__name__)


def create_app(config: dict = None) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    CORS(app)

    if config:
        app.config.update(config)

    app.config.setdefault("LOG_LEVEL", "INFO")
    app.config.setdefault("MAX_BATCH_SIZE", 1000)

    engine = ParserEngine(ParserConfig(
        log_level=app.config["LOG_LEVEL"],
        strip_whitespace=True,
    ))

    def _result_response(result: ParseResult):
        status = 200 if result.ok else 422
        return jsonify(result.model_dump(mode="json")), status

    # ─── Health Check ─────────────────────────────────────────────────────

    @app.route("/api/health", methods=["GET"])
    def health():
        """Health check endpoint."""
        return jsonify({
            "status": "healthy",
            "service": "rome",
            "version": __version__,
        })

    @app.route("/api/info", methods=["GET"])
    def info():
        """Parser version and capability info."""
        return jsonify({
            "version": __version__,
            "capabilities": [
                "parse",
                "batch_parse",
                "render",
            ],
            "alphabet": "IVXLCDM",
        })

    # ─── Parse Endpoints ──────────────────────────────────────────────────

    @app.route("/api/parse", methods=["POST"])
    def parse_numeral():
        """Parse the numeral given in a JSON body."""
        data = request.get_json(silent=True) or {}
        numeral = data.get("numeral")
        if not isinstance(numeral, str):
            return jsonify({
                "error": "Provide JSON with a 'numeral' string"
            }), 400

        return _result_response(engine.parse(numeral))

    @app.route("/api/parse/<numeral>", methods=["GET"])
    def parse_numeral_path(numeral: str):
        """Parse the numeral given in the URL path."""
        return _result_response(engine.parse(numeral))

    @app.route("/api/batch", methods=["POST"])
    def batch_parse():
        """
        Parse several numerals at once.

        Each numeral is parsed independently; one bad numeral does not
        fail the batch.
        """
        data = request.get_json(silent=True) or {}
        numerals = data.get("numerals")
        if not isinstance(numerals, list) or not all(
            isinstance(n, str) for n in numerals
        ):
            return jsonify({
                "error": "Provide JSON with a 'numerals' list of strings"
            }), 400

        if len(numerals) > app.config["MAX_BATCH_SIZE"]:
            return jsonify({
                "error": f"Batch too large (max {app.config['MAX_BATCH_SIZE']})"
            }), 413

        results = [engine.parse(n) for n in numerals]
        valid = sum(1 for r in results if r.ok)

        return jsonify({
            "total": len(results),
            "valid": valid,
            "invalid": len(results) - valid,
            "results": [r.model_dump(mode="json") for r in results],
        })

    # ─── Render Endpoint ──────────────────────────────────────────────────

    @app.route("/api/render/<int(signed=True):value>", methods=["GET"])
    def render(value: int):
        """Canonical numeral for a positive integer."""
        try:
            numeral = int_to_roman(value)
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify({"value": value, "numeral": numeral})

    return app


def run_server(
    host: str = "127.0.0.1",
    port: int = 5000,
    debug: bool = False,
):
    """Start the microservice server."""
    app = create_app()
    logger.info(f"Starting server on {host}:{port}")
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    run_server(debug=True)
