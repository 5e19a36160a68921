"""MCP Server entry point for the surf assessment API."""

import logging
import os
import sys

from fastmcp import FastMCP

from surfcast.resources.config import get_settings
from surfcast.tools.surf_tools import register_tools

# Configure logging to stderr (required for STDIO transport)
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP(
    name="surfcast",
    instructions="""
    This MCP server assesses surf conditions at Taiwan surf spots using
    buoy observations from the Central Weather Administration (CWA) open data API.

    Available tools:
    - assess_surf_conditions: Assess conditions from wave and wind readings
    - get_buoy_assessment: Fetch the latest buoy observation and assess it

    Typical workflow:
    1. Use get_buoy_assessment("46708A", 90) for a beach facing east near 龜山島浮標
    2. Or call assess_surf_conditions(1.2, 11, "西風", 12, 90) with your own readings

    The assessment includes:
    - Wave size on a body scale (ankle to double overhead), period class and power
    - Wind type (offshore/onshore/cross-shore), surface texture and strength
    - Safety level (safe/warning/danger)
    - Suitability for longboard, shortboard and funboard with a recommendation
    - An overall assessment in Traditional Chinese

    Offshore wind (blowing from land to sea) grooms the wave face.
    Ground swell (period >= 9 seconds) carries more energy than wind swell.
    """,
)

# Register tools
register_tools(mcp)


@mcp.custom_route("/health", methods=["GET"])
async def health_check(request):
    """Health check endpoint."""
    from starlette.responses import JSONResponse

    settings = get_settings()
    has_api_key = bool(settings.cwa_api_key)

    return JSONResponse(
        {
            "status": "healthy",
            "service": "surfcast",
            "cwa_api_configured": has_api_key,
        }
    )


def main():
    """Run the MCP server."""
    settings = get_settings()

    # Log configuration (without sensitive data)
    logger.info("Starting Surfcast MCP Server")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"CWA API configured: {bool(settings.cwa_api_key)}")

    # Use HTTP for deployments, STDIO for local MCP clients
    transport = os.getenv("MCP_TRANSPORT", settings.mcp_transport)

    if transport == "stdio":
        logger.info("Running with STDIO transport (local development)")
        mcp.run(transport="stdio")
    else:
        port = int(os.getenv("PORT", settings.port))
        logger.info(f"Running with HTTP transport on port {port}")
        mcp.run(
            transport="http",
            host="0.0.0.0",
            port=port,
        )


if __name__ == "__main__":
    main()
