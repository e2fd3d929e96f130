"""
Better UX MCP Server

UX/UI guidance for React/Material-UI components, served over the Model
Context Protocol.
"""

__version__ = "1.0.0"
