"""Entry point for the gemurl MCP server.

CRITICAL: Logging must be initialized BEFORE importing server module
to avoid import-time side effects.
"""

import sys


def main() -> int:
    """
    Run the MCP server.

    Initializes logging and configuration, then starts the FastMCP server.

    Returns:
        Exit code (0 for success)
    """
    from .config import get_config
    from .logging_config import setup_logging

    config = get_config()
    setup_logging(config)

    from .server import mcp

    mcp.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
