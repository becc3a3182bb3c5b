"""MCP server for codeoutline."""

import asyncio
import json

from mcp.server import Server
from mcp.types import Tool, TextContent

from .tools.get_file_outline import get_file_outline, outline_files


FORMAT_ENUM = ["json", "yaml", "ascii", "llmtext"]

# Create server
server = Server("codeoutline")


def _outline_options() -> dict:
    """Schema properties shared by the outline tools."""
    return {
        "depth": {
            "type": ["integer", "string"],
            "description": "Maximum outline depth (>= 1), or 'Infinity' for unbounded",
            "default": "Infinity"
        },
        "named_only": {
            "type": "boolean",
            "description": "Only include named constructs and their ancestors",
            "default": True
        },
        "format": {
            "type": "string",
            "description": "Output format",
            "enum": FORMAT_ENUM,
            "default": "json"
        },
    }


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="get_file_outline",
            description="Get the structural outline of a JavaScript or TypeScript file: functions, classes, methods, variables, interfaces and imports with line spans.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path to the source file (absolute or relative, supports ~)"
                    },
                    **_outline_options(),
                },
                "required": ["path"]
            }
        ),
        Tool(
            name="outline_files",
            description="Get outlines for every file matching a glob pattern (e.g. 'src/**/*.{js,ts}'). node_modules, dist and build are ignored.",
            inputSchema={
                "type": "object",
                "properties": {
                    "pattern": {
                        "type": "string",
                        "description": "Glob pattern; supports ** and {a,b}"
                    },
                    **_outline_options(),
                },
                "required": ["pattern"]
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "get_file_outline":
            result = get_file_outline(
                path=arguments["path"],
                depth=arguments.get("depth"),
                named_only=arguments.get("named_only", True),
                fmt=arguments.get("format", "json")
            )
        elif name == "outline_files":
            result = await outline_files(
                pattern=arguments["pattern"],
                depth=arguments.get("depth"),
                named_only=arguments.get("named_only", True),
                fmt=arguments.get("format", "json")
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}, indent=2))]


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
