"""Common middleware for Fastivalle."""

from .observability import StructlogContextMiddleware

__all__ = ["StructlogContextMiddleware"]
