from __future__ import annotations

__all__ = [
    "DependencyUnavailable",
]


class DependencyUnavailable(Exception):
    """
    A backing service (the namespace registry, the dispatch fabric or the database)
    is unreachable, timed out or answered with an unexpected error.
    """
