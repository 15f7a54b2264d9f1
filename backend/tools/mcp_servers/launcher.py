"""ABOUTME: MCP server launcher that serves the movie server over Streamable HTTP with CORS.

Builds the FastMCP Starlette app (MCP endpoint at /mcp, health check at
/health), wraps it with permissive CORS so browser-hosted clients and widgets
can reach it, and runs it with Uvicorn on HOST:PORT.
"""

import logging
import sys

import uvicorn
from starlette.middleware.cors import CORSMiddleware

from movie_mcp.config import LauncherSettings

# Setup logging early
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = [
    "authorization",
    "x-client-info",
    "apikey",
    "content-type",
    "mcp-session-id",
    "mcp-protocol-version",
    "last-event-id",
]
CORS_ALLOW_METHODS = ["GET", "POST", "DELETE", "OPTIONS"]
CORS_EXPOSE_HEADERS = ["mcp-session-id"]


def build_app():
    """Build the ASGI app for the movie MCP server.

    Returns:
        Starlette application with CORS middleware installed
    """
    from movie_search import server as movie_server

    app = movie_server.get_streamable_http_app()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
        expose_headers=CORS_EXPOSE_HEADERS,
    )
    return app


def run_server(host: str, port: int) -> None:
    """Run the movie MCP server.

    Args:
        host: Host to bind to
        port: Port to bind to
    """
    try:
        app = build_app()
    except ImportError as e:
        logger.error(f"Failed to import movie MCP server: {e}")
        sys.exit(1)

    logger.info(f"Starting movie MCP server on {host}:{port} (transport: streamable-http)")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    settings = LauncherSettings()
    run_server(settings.host, settings.port)
