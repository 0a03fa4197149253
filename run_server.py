#!/usr/bin/env python3
"""Development server runner for Module Defense."""

import argparse

import uvicorn

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the Module Defense API server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=9000)
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    args = parser.parse_args()

    uvicorn.run(
        "module_defense.server.main:app",
        host=args.host,
        port=args.port,
        reload=not args.no_reload,  # Auto-reload on code changes
        log_level="info",
    )
