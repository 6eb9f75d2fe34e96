"""
User records API server (uvicorn).

Usage:
  python -m user_api [--config PATH] [--host HOST] [--port PORT] [--log-level LEVEL]

Notes:
- Records live in memory only; restarting the process empties the store.
- Settings resolve from env vars, then config.yaml, then defaults.
"""
from __future__ import annotations

import argparse
import logging

import uvicorn

from .config import get_settings
from .logs import configure_logging

logger = logging.getLogger("user_api")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="user-api", description="In-memory user records API")
    p.add_argument("--config", help="Path to a config.yaml")
    p.add_argument("--host", help="Bind address")
    p.add_argument("--port", type=int, help="Listen port")
    p.add_argument("--log-level", help="DEBUG / INFO / WARNING / ERROR")
    return p


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)
    settings = get_settings(args.config)
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    if args.log_level:
        settings.log_level = args.log_level

    configure_logging(settings.log_level)

    from .api import create_app

    app = create_app(settings)
    base = f"http://localhost:{settings.port}"
    logger.info("Server starting on %s:%d", settings.host, settings.port)
    logger.info("API documentation available at: %s/docs", base)
    logger.info("Health check available at: %s/health", base)
    logger.info("User endpoints available at: %s/api/v1/users", base)

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
