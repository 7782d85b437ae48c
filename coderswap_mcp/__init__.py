"""
CoderSwap MCP Server

Guardrail-enforced MCP gateway to the CoderSwap knowledge-base backend.
"""

__version__ = "0.1.0"
