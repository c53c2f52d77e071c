"""FastMCP server initialization for Taskito MCP."""

from mcp.server.fastmcp import FastMCP

from taskito_mcp.config import load_settings
from taskito_mcp.logging_setup import setup_logging

# Initialize the MCP server
mcp = FastMCP("taskito_mcp")


def run() -> None:
    """Run the MCP server over stdio."""
    settings = load_settings()
    setup_logging(console_level=settings.log_level, log_file=settings.log_file)

    # Importing the tools registers them with the server
    import taskito_mcp.tools  # noqa: F401

    mcp.run()


if __name__ == "__main__":
    run()
