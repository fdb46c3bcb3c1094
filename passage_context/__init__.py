"""Passage context server.

Keyword-driven passage extraction that grounds LLM tool calls in a fixed
reference text, exposed over HTTP and MCP.
"""

__version__ = "0.1.0"
