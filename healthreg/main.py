"""Entry point for the check registry server."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import uvicorn
from rich.console import Console
from rich.panel import Panel

from healthreg.config import settings

console = Console()
logger = logging.getLogger(__name__)


def nuke_checks(path: Path) -> None:
    """Delete the persistence file so the store starts empty."""
    path.unlink(missing_ok=True)
    logger.warning("Removed existing checks at %s", path)


def run_server() -> None:
    """Start the FastAPI server."""
    scheme = "https" if settings.ssl_enabled else "http"
    console.print(
        Panel.fit(
            f"[bold]Health Check Registry[/bold]\n"
            f"Bind:  {scheme}://{settings.api_host}:{settings.api_port}\n"
            f"Checks: {settings.repo_path}",
            title="healthreg",
            border_style="green",
        )
    )

    ssl_kwargs: dict[str, str] = {}
    if settings.ssl_enabled:
        ssl_kwargs = {"ssl_certfile": settings.ssl_cert, "ssl_keyfile": settings.ssl_key}

    uvicorn.run(
        "healthreg.api.server:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
        **ssl_kwargs,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Endpoint health check registry")
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Start the API server")
    serve.add_argument("--host", default=settings.api_host, help="address the server listens on")
    serve.add_argument("--port", type=int, default=settings.api_port, help="port the server listens on")
    serve.add_argument("--ssl", action="store_true", default=settings.ssl_enabled, help="enable TLS")
    serve.add_argument("--sslcert", default=settings.ssl_cert, help="TLS certificate path")
    serve.add_argument("--sslkey", default=settings.ssl_key, help="TLS key path")
    serve.add_argument("--repopath", default=settings.repo_path, help="file the checks are persisted to")
    serve.add_argument("--nuke", action="store_true", help="delete existing checks before starting")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command != "serve":
        parser.print_help()
        sys.exit(1)

    if args.ssl and not (args.sslcert and args.sslkey):
        parser.error("--ssl requires --sslcert and --sslkey")

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    settings.api_host = args.host
    settings.api_port = args.port
    settings.ssl_enabled = args.ssl
    settings.ssl_cert = args.sslcert
    settings.ssl_key = args.sslkey
    settings.repo_path = args.repopath

    if args.nuke:
        nuke_checks(Path(settings.repo_path))

    run_server()


if __name__ == "__main__":
    main()
