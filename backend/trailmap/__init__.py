"""TrailMap - route visualization backend"""

__version__ = "0.1.0"
