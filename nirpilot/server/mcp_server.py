"""nirpilot MCP stdio server: FastMCP entrypoint."""

from mcp.server.fastmcp import FastMCP

from nirpilot.log import setup_logging

# Create MCP server instance
mcp = FastMCP(
    "nirpilot",
    instructions=(
        "Desktop automation on Windows through NirCmd: find windows by title, "
        "class, process or focus and act on them; send keys and mouse clicks; "
        "take screenshots, speak, beep, manage the clipboard and volume."
    ),
)

# Import tool modules to register them with mcp
from nirpilot.server.tools import window_tools  # noqa: F401, E402
from nirpilot.server.tools import input_tools  # noqa: F401, E402
from nirpilot.server.tools import system_tools  # noqa: F401, E402


def main():
    """Run the MCP server via stdio transport."""
    from nirpilot.server.state import get_state

    setup_logging(get_state().config.log_level)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
