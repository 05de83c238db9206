"""Command line interface for golemio-mcp."""
