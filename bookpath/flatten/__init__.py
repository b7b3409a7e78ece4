"""Flatteners turning hierarchical book topologies into ordered sequences."""

from .menu import MenuFlattener
from .tree import TreeFlattener

__all__ = ["MenuFlattener", "TreeFlattener"]
