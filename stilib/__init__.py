"""Growable arrays, bucketed hash maps and simple string types."""

__version__ = "0.1.0"
__all__ = ["dynarray", "hashmap", "stistring", "utility"]