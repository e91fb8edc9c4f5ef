"""
Pathfinding Race.

Runs Dijkstra, A*, breadth-first and depth-first search over weighted
undirected graphs, one step at a time or in a single batch, and judges
races between two strategies.
"""

__version__ = "0.1.0"
