"""edgepath — shortest paths over undirected edge lists."""

__version__ = "0.1.0"
