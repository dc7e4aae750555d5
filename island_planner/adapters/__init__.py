"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Graph storage (CSV files)
- Distance oracle (memoized Dijkstra)
- Caching (in-memory)
"""
