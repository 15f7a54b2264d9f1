"""ABOUTME: Base class for MCP servers with common initialization, logging, and health check patterns.

Uses the official MCP SDK (modelcontextprotocol/python-sdk) FastMCP server.
"""

import logging
from mcp.server.fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse


def setup_logging(logger_name: str, level: int = logging.INFO) -> logging.Logger:
    """Configure logging for an MCP server.

    Args:
        logger_name: Name of the logger (typically __name__)
        level: Logging level (default: logging.INFO)

    Returns:
        Configured logger instance
    """
    logging.basicConfig(level=level)
    return logging.getLogger(logger_name)


class MCPServerBase:
    """Base class for MCP servers with common patterns.

    Provides:
    - Standard MCP server initialization
    - Consistent logging setup
    - GET /health route on the HTTP app

    Note: CORS and host binding are handled by launcher.py
    """

    def __init__(self, server_name: str, host: str = "0.0.0.0"):
        """Initialize MCP server base.

        Args:
            server_name: Name of the MCP server (e.g., "movie-mcp-server")
            host: Host FastMCP binds to when run directly (default: 0.0.0.0 for Docker)
        """
        self.server_name = server_name
        self.mcp = FastMCP(server_name, host=host)
        self.logger = setup_logging(__name__)
        self._register_health_route()

    def _register_health_route(self) -> None:
        @self.mcp.custom_route("/health", methods=["GET"])
        async def health(request: Request) -> JSONResponse:
            return JSONResponse({"status": "ok", "server": self.server_name})

    def get_logger(self) -> logging.Logger:
        """Get the logger instance.

        Returns:
            Configured logger for this server
        """
        return self.logger

    def get_mcp(self) -> FastMCP:
        """Get the FastMCP server instance.

        Returns:
            FastMCP server for tool registration
        """
        return self.mcp

    def run(self, transport: str = "streamable-http") -> None:
        """Run the MCP server.

        Note: For deployment, use launcher.py instead which adds CORS and
        binds to the configured host using Starlette + Uvicorn.

        Args:
            transport: Transport protocol ("streamable-http", "stdio", "sse")
        """
        self.mcp.run(transport=transport)

    def get_streamable_http_app(self):
        """Get the Starlette ASGI app for streamable-http transport.

        This is used by launcher.py; the MCP endpoint is mounted at /mcp.

        Returns:
            Starlette ASGI application instance
        """
        return self.mcp.streamable_http_app()

    def log_tool_start(self, tool_name: str, **params) -> None:
        """Log tool invocation with parameters.

        Args:
            tool_name: Name of the tool being invoked
            **params: Keyword arguments to log (will be formatted)

        Examples:
            >>> server.log_tool_start("search_movies", query="Alien")
        """
        if params:
            param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
            self.logger.info(f"{tool_name} started: {param_str}")
        else:
            self.logger.info(f"{tool_name} started")

    def log_tool_complete(self, tool_name: str, **metrics) -> None:
        """Log tool completion with execution metrics.

        Args:
            tool_name: Name of the tool that completed
            **metrics: Performance/execution metrics to log

        Examples:
            >>> server.log_tool_complete("search_movies", results=3, duration_ms=150)
        """
        if metrics:
            metric_str = ", ".join(f"{k}={v}" for k, v in metrics.items())
            self.logger.info(f"{tool_name} completed: {metric_str}")
        else:
            self.logger.info(f"{tool_name} completed")

    def log_tool_error(
        self,
        tool_name: str,
        error_code: str,
        error_message: str,
        **context
    ) -> None:
        """Log a degraded tool outcome with context.

        Args:
            tool_name: Name of the tool that degraded
            error_code: Machine-readable error code
            error_message: Human-readable error message
            **context: Additional error context

        Examples:
            >>> server.log_tool_error("search_movies", "upstream_http_failure", "status 401")
        """
        context_str = ", ".join(f"{k}={v!r}" for k, v in context.items()) if context else ""
        if context_str:
            self.logger.warning(f"{tool_name} error [{error_code}]: {error_message} ({context_str})")
        else:
            self.logger.warning(f"{tool_name} error [{error_code}]: {error_message}")
