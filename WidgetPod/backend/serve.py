#!/usr/bin/env python3
"""Run the WidgetPod API (FastAPI + Uvicorn).

Usage:
  python3 serve.py --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import os
from typing import List, Optional

import uvicorn

from main import create_app
from settings import ENV_PREFIX, Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="WidgetPod (FastAPI) server.")
    parser.add_argument("--host", default=os.environ.get(ENV_PREFIX + "HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.environ.get(ENV_PREFIX + "PORT", "8000")))
    parser.add_argument("--reload", action="store_true", help="Auto-reload code (development)")
    parser.add_argument("--log-level", default=None, choices=["critical", "error", "warning", "info", "debug", "trace"])
    parser.add_argument("--cors-allow-origin", action="append", default=[], help="CORS allow origin (repeatable)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.reload and args.cors_allow_origin:
        parser.error(f"--cors-allow-origin cannot be combined with --reload; set {ENV_PREFIX}CORS_ALLOW_ORIGINS instead")

    settings = Settings.from_env()
    if args.cors_allow_origin:
        settings = dataclasses.replace(settings, cors_allow_origins=list(args.cors_allow_origin))
    log_level = args.log_level or settings.log_level

    logging.basicConfig(
        level=logging.getLevelName(log_level.upper()) if log_level != "trace" else logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.reload:
        # reload needs an import string, so settings come from the environment only
        uvicorn.run("main:app", host=args.host, port=args.port, reload=True, log_level=log_level)
        return

    uvicorn.run(create_app(settings), host=args.host, port=args.port, log_level=log_level)


if __name__ == "__main__":
    main()
