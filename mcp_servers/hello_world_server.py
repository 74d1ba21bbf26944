#!/usr/bin/env python
"""Minimal MCP server: a greeting tool and a clock tool."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Annotated, List, Optional

# Add parent directory to path to import our modules
sys.path.append(str(Path(__file__).parent.parent))

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from weather_api.settings import WeatherSettings, configure_logging

logger = logging.getLogger(__name__)

SERVER_NAME = "hello-world"


def say_hello(name: Optional[str] = None) -> str:
    """Greet ``name``, or the world when no name is given."""
    return f"Hello, {name}!" if name else "Hello, World!"


def get_time(now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return f"Current time: {now.strftime('%c')}"


def create_server() -> FastMCP:
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name="say_hello", description="Returns a simple hello world greeting")
    def say_hello_tool(
        name: Annotated[
            Optional[str], Field(description="Name to greet (optional)")
        ] = None,
    ) -> str:
        return say_hello(name)

    @mcp.tool(name="get_time", description="Returns the current time")
    def get_time_tool() -> str:
        return get_time()

    return mcp


def main(argv: Optional[List[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    transport = "sse" if "--sse" in argv else "stdio"
    try:
        configure_logging(WeatherSettings.from_env().log_level)
        mcp = create_server()
        logger.info("Hello World MCP Server running on %s", transport)
        mcp.run(transport=transport)
    except Exception as e:
        print(f"Fatal error in main(): {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
