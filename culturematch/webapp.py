"""
Flask API for culture matching.

GET  /api/enrich?domain=acme.com&flexibility=very-important
POST /api/enrich  {"domain": "acme.com", "preferences": {...}}
"""
from __future__ import annotations

from typing import Any

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from culturematch.analysis import get_analyzers, get_search
from culturematch.config import get_env, load_settings
from culturematch.log import get_logger
from culturematch.preferences import from_query_args
from culturematch.service import MissingDomainError, enrich

log = get_logger(__name__)


def _read_request() -> tuple[str | None, Any]:
    if request.method == "POST":
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        domain = body.get("domain") or body.get("companyDomain")
        return (domain if isinstance(domain, str) else None), body.get("preferences")
    return request.args.get("domain"), from_query_args(request.args)


def create_app(settings: dict[str, Any] | None = None, env_getter=get_env) -> Flask:
    app = Flask(__name__)
    app.json.ensure_ascii = False
    app.json.sort_keys = False
    app.config["CULTUREMATCH_SETTINGS"] = settings if settings is not None else load_settings()
    CORS(app, send_wildcard=True)

    @app.route("/api/health")
    def health():
        cfg = app.config["CULTUREMATCH_SETTINGS"]
        names = [a.name for a in get_analyzers(cfg, env_getter)]
        if get_search(cfg, env_getter) is not None:
            names.append("search")
        return jsonify({"status": "ok", "analyzers": names})

    @app.route("/api/enrich", methods=["GET", "POST"])
    def enrich_domain():
        domain, preferences = _read_request()
        try:
            result = enrich(
                domain,
                preferences,
                settings=app.config["CULTUREMATCH_SETTINGS"],
                env_getter=env_getter,
            )
        except MissingDomainError:
            return jsonify({"error": "Missing domain"}), 400
        return jsonify(result.to_dict())

    @app.errorhandler(Exception)
    def handle_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return jsonify({"error": exc.name}), exc.code
        log.exception("Enrichment failed")
        return jsonify({"error": "Failed to enrich domain", "details": str(exc)}), 500

    return app
