"""Context-free grammar data structures for LR-family parser generators."""

__version__ = "0.1.0"
__all__ = ["grammar"]