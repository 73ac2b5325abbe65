"""CLI entrypoint: run the HTTP server or the MCP server."""

import argparse

from ..config.runtime import get_settings
from .observability import get_logger, setup_logging


def serve(host: str | None = None, port: int | None = None) -> None:
    """Start the HTTP app with uvicorn."""
    import uvicorn

    from .http.app import create_app

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    get_logger().info("server_start", extra={"host": host, "port": port, "base_url": settings.base_url})
    uvicorn.run(create_app(), host=host, port=port, log_level=settings.log_level.lower())


def serve_mcp() -> None:
    """Start the MCP server over stdio."""
    from .mcp.server import create_server

    create_server().run(transport="stdio")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="adserver", description="Keyword-targeted ad server")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address (default: settings.host)")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port (default: settings.port)")

    subparsers.add_parser("mcp", help="Run the MCP server over stdio")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(get_settings().log_level)

    if args.command == "serve":
        serve(args.host, args.port)
    elif args.command == "mcp":
        serve_mcp()
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
