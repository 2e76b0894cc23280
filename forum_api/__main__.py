"""
Run the forum API with uvicorn.

Usage:
  python -m forum_api [--host 127.0.0.1] [--port 8000] [--create-tables]
"""
from __future__ import annotations

import argparse

import uvicorn

from forum_api.db.create_tables import create_all


def main() -> None:
    ap = argparse.ArgumentParser(description="Run the forum API")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--create-tables", action="store_true", help="Create the schema before serving")
    args = ap.parse_args()

    if args.create_tables:
        create_all()
    uvicorn.run("forum_api.app:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
