"""Adapters for concrete clients."""
