"""Environment resolution and default signal names for simplechalk.

- defaults: signal names (NO_COLOR, MCP_MODE, FORCE_COLOR) and markers
- resolver: enable/disable decision and render context from ambient signals
"""
