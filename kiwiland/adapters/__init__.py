"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to its data sources:
- Graph storage (inline edge tokens or an edge list file)
"""
