"""Fetch, parse and display real-time quotes for Shanghai and Shenzhen stocks."""

__version__ = "1.0.0"