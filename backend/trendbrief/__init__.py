"""
Frustration trend brief: ranked complaint phrases from discussion forums.
"""

__version__ = "0.1.0"
