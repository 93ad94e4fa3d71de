"""
Constants for the matrixgraph package.

Sentinels, separators and message templates live here so the graph
and the algorithms format their output identically.
"""

# =============================================================================
# Algorithm sentinels
# =============================================================================

# Returned by shortest_path when the end vertex is unreachable
NO_PATH = "-1"

# Returned by is_bipartite when an odd cycle is found
NOT_BIPARTITE = "0"

# Returned by negative_cycle when no (negative) cycle exists
NO_NEGATIVE_CYCLE = "0"

# Two-coloring values; vertices never reached keep UNCOLORED
UNCOLORED = -1
COLOR_A = 0
COLOR_B = 1

# =============================================================================
# Formatting
# =============================================================================

PATH_SEPARATOR = "->"
CELL_SEPARATOR = ", "
ROW_SEPARATOR = ", "

SUMMARY_TEMPLATE = "Graph with {vertices} vertices and {edges} edges."
BIPARTITE_TEMPLATE = "The graph is bipartite: A={{{group_a}}}, B={{{group_b}}}"
NEGATIVE_CYCLE_TEMPLATE = "Negative cycle: {distance}"

# Prefix for auto-generated graph names
DEFAULT_NAME_PREFIX = "graph_"
