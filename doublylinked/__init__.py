"""A doubly-linked list with entry handles, sorting and removal-safe iteration."""

__version__ = "1.2.0"
__all__ = ["__version__"]