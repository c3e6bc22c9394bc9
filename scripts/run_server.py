#!/usr/bin/env python
"""
Serve the recipe API with uvicorn.

Run with:
    python scripts/run_server.py --host 0.0.0.0 --port 8000
"""
import argparse
import logging

import uvicorn

from nem_recipes.app.core.config import get_settings


def main():
    parser = argparse.ArgumentParser(description="Run the NEM recipe server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(
        "nem_recipes.app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
