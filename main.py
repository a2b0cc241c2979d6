#!/usr/bin/env python3
"""
Customer Profile Service -- command-line entry point.

Usage:
  python main.py serve
  python main.py serve --host 0.0.0.0 --port 8080
  python main.py serve --reload

Environment variables:
  SECRET_KEY     Token signing key, at least 32 characters. Required unless DEBUG=true.
  DATABASE_URL   SQLAlchemy URL. Defaults to a SQLite file next to the package.
  DEBUG          "true" auto-generates SECRET_KEY for local development.
"""

import argparse
from typing import Optional

import uvicorn


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="customerprofile",
        description="User registration, JWT login, and customer profile CRUD over HTTP.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    serve.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    serve.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "serve":
        uvicorn.run("asgi:app", host=args.host, port=args.port, reload=args.reload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
