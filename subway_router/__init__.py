"""
Subway Router

Shortest-path routing over subway networks whose stations sit in 3-D space.
Lines join consecutive stations, edges are weighted by straight-line distance,
and routes report every line they travel on.
"""

__version__ = "1.0.0"
__author__ = "Subway Router Development Team"
__description__ = "Minimum-distance routing for 3-D subway networks"
