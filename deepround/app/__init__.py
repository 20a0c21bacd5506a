from .rounding import get_walker, transform

__all__ = [
    "get_walker",
    "transform",
]
