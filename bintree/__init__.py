"""Binary tree of integers with parent links, traversals, shape measurements and worked examples."""

__version__ = "0.1.0"
__all__ = ["node", "demo"]