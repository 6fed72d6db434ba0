from .serper import search_upstream

__all__ = [
    "search_upstream",
]
