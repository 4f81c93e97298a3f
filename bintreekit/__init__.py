"""Binary tree nodes, traversals, views and structural properties."""

__version__ = "0.1.0"
__all__ = ["node", "traversals", "properties", "views"]