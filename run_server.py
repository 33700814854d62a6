#!/usr/bin/env python3
"""Entry point to serve the culture match API."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from culturematch.config import load_settings
from culturematch.log import get_logger
from culturematch.webapp import create_app

log = get_logger(__name__)


def main(argv: list[str] | None = None) -> None:
    settings = load_settings()
    server = settings.get("server") or {}

    parser = argparse.ArgumentParser(description="Serve the CultureMatch API")
    parser.add_argument("--host", default=server.get("host", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(server.get("port", 5000)))
    parser.add_argument("--debug", action="store_true", default=bool(server.get("debug", False)))
    args = parser.parse_args(argv)

    app = create_app(settings)
    log.info("Serving CultureMatch API on http://%s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
