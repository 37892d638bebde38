"""MCP server for map-vector-forge.

Registers all tools and runs via stdio transport.
"""

from mcp.server.fastmcp import FastMCP

from .tools.render import register_render_tools

mcp = FastMCP(
    "map-vector-forge",
    instructions="Convert bounded OpenStreetMap GeoJSON into flat, layered SVG for design tools",
)

register_render_tools(mcp)


def main():
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
