"""Top-level package for the Kiwiland railroad service.

The graph engine (``kiwiland.graph``) answers distance, trip-count and
shortest-route questions about a small one-way rail network. The
service, container and API packages wire it to configuration and HTTP.
"""

__version__ = "1.0.0"
