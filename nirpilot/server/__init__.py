"""MCP server exposing nirpilot as tools."""
